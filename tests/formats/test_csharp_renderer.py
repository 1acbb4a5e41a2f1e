"""
C# Model Renderer Tests.

Tests for rendering the C# view model:
- Naming filters
- Complete single-file output
- One file per class
- Association fields, constructors, derived accessors and validity checks
"""

import os

import pytest

from fixtures import INHERITED_CTOR_OBJECT_MODEL
from ontogen.formats.csharp import CSharpMapper, CSharpModelRenderer
from ontogen.formats.csharp.csharp_renderer import (
    association_field_name,
    collapse_blank_lines,
    count_field_name,
    file_name,
    lower_camel,
    max_items_constant_name,
    min_items_constant_name,
    namespace_name,
    plural_class_name,
    split_words,
    type_name,
    upper_camel,
)
from ontogen.formats.csharp.csharp_view_model import ClassViewModel, TypeInfoViewModel
from ontogen.shared.models import (
    ClassInfo,
    GeneratorOptions,
    ObjectModel,
    RelationEndInfo,
    RelationInfo,
)


EXPECTED_TEST_CLASS_FILE = """using Ccmi.OntoUml.Utilities.AssociationClasses;
using Ccmi.OntoUml.Utilities.Collections;
using System;
using System.Collections.Generic;
using System.Linq;
namespace MyNamespace
{
    public interface ICanValidate
    {
        bool IsValid(bool deep);
        void Invalidate();
    }

    public interface ITestClass : ICanValidate
    {
        int? Prop { get; set; }
    }
    public class TestClass : ITestClass
    {
        public TestClass()
        {
        }
        private int? prop;
        public virtual int? Prop
        {
            get { return prop; }
            set 
            {
                prop = value;
            }
        }
        private bool isInvalidated = false;
        public virtual void Invalidate()
        {
            isInvalidated = true;
        }
        public virtual bool IsValid(bool deep)
        {
            if (isInvalidated) return false;
            return true;
        }
    }
}"""


@pytest.fixture
def renderer():
    return CSharpModelRenderer()


def view_model_of(data_or_model, **option_values):
    model = data_or_model if isinstance(data_or_model, ObjectModel) else ObjectModel.from_dict(data_or_model)
    return CSharpMapper().model_to_view_model(model, GeneratorOptions(**option_values), type_mapping={})


@pytest.mark.unit
class TestNaming:
    """Tests for the naming filters."""

    def test_split_words(self):
        assert split_words("XMLHttpRequest2") == ["XML", "Http", "Request2"]
        assert split_words("my_field") == ["my", "field"]
        assert split_words("") == []

    def test_camel_case(self):
        assert upper_camel("testClass") == "TestClass"
        assert upper_camel("one_to_many") == "OneToMany"
        assert lower_camel("TestClass") == "testClass"
        assert lower_camel("XMLHttpRequest") == "xmlHttpRequest"

    def test_derived_names(self):
        assert plural_class_name("wheel") == "Wheels"
        assert plural_class_name("enrollments") == "Enrollments"
        assert min_items_constant_name("wheels") == "WHEELS_MIN_ITEMS"
        assert max_items_constant_name("frontWheels") == "FRONT_WHEELS_MAX_ITEMS"
        assert count_field_name("wheels") == "wheelsCount"
        assert association_field_name("EnrollmentStudent") == "enrollmentStudentAssociation"

    def test_namespace_name(self):
        assert namespace_name("my.company_model") == "My.CompanyModel"

    def test_type_name(self):
        assert type_name(None) == "void"
        assert type_name(TypeInfoViewModel(name="int", should_make_nullable=True)) == "int?"
        assert type_name(TypeInfoViewModel(name="Person", is_reference=True)) == "IPerson"

    def test_file_name(self):
        assert file_name(ClassViewModel(name="CanValidate", is_interface=True)) == "ICanValidate.cs"
        assert file_name(ClassViewModel(name="testClass")) == "TestClass.cs"


@pytest.mark.unit
class TestSingleFile:
    """Tests for single-file output."""

    def test_complete_output(self, renderer, tmp_path, simple_object_model_data):
        output = tmp_path / "Model.cs"
        view_model = view_model_of(simple_object_model_data, configuration={"namespace": "MyNamespace"})

        operations = renderer.generate_code(view_model, GeneratorOptions(output=str(output), single_file=True))

        assert len(operations) == 1
        assert output.read_text(encoding="utf-8") == EXPECTED_TEST_CLASS_FILE

    def test_default_file_name(self, renderer, tmp_path, monkeypatch, simple_object_model_data):
        monkeypatch.chdir(tmp_path)

        renderer.generate_code(view_model_of(simple_object_model_data), GeneratorOptions(single_file=True))

        assert (tmp_path / "Model.cs").exists()

    def test_default_namespace(self, renderer, simple_object_model_data):
        content = renderer.render_single_file(view_model_of(simple_object_model_data))

        assert "namespace OntoModel\n{" in content

    def test_whitespace_only_lines_are_removed(self):
        assert collapse_blank_lines("a\n\n   \n\t\nb\n") == "a\nb\n"

    def test_classes_are_separated_by_one_blank_line(self, renderer, simple_object_model_data):
        content = renderer.render_single_file(view_model_of(simple_object_model_data))

        assert "    }\n\n    public interface ITestClass" in content
        assert "\n\n\n" not in content

    def test_options_required(self, renderer, simple_object_model_data):
        with pytest.raises(ValueError):
            renderer.generate_code(view_model_of(simple_object_model_data), None)


@pytest.mark.unit
class TestMultipleFiles:
    """Tests for one file per class."""

    def test_one_file_per_class(self, renderer, tmp_path, simple_object_model_data):
        output_dir = tmp_path / "generated"

        operations = renderer.generate_code(view_model_of(simple_object_model_data),
                                            GeneratorOptions(output=str(output_dir)))

        assert sorted(os.listdir(output_dir)) == ["ICanValidate.cs", "TestClass.cs"]
        assert [os.path.basename(operation.path) for operation in operations] == ["ICanValidate.cs", "TestClass.cs"]

    def test_every_file_has_usings_and_namespace(self, renderer, tmp_path, simple_object_model_data):
        renderer.generate_code(view_model_of(simple_object_model_data), GeneratorOptions(output=str(tmp_path)))

        content = (tmp_path / "TestClass.cs").read_text(encoding="utf-8")
        assert content.startswith("using Ccmi.OntoUml.Utilities.AssociationClasses;\n")
        assert "namespace OntoModel\n{\n    public interface ITestClass : ICanValidate\n" in content
        assert content.endswith("    }\n}")


@pytest.mark.unit
class TestClassRendering:
    """Tests for relations, constructors and validity checks in rendered classes."""

    def test_association_field(self, renderer, relator_object_model_data):
        student = view_model_of(relator_object_model_data).find_class("Student")

        content = renderer.render_class(student)

        assert (
            "        private static readonly Association<IStudent, IEnrollment> enrollmentStudentAssociation =\n"
            "            Association.Get<IStudent, IEnrollment>(\"enrollmentStudent\", AssociationKind.OneToMany, false);"
        ) in content
        assert "        IEnumerable<IEnrollment> Enrollments { get; }" in content
        assert "AddEnrollment" not in content

    def test_ctor_links_essential_parts(self, renderer, relator_object_model_data):
        enrollment = view_model_of(relator_object_model_data).find_class("Enrollment")

        content = renderer.render_class(enrollment)

        assert "        public Enrollment(IStudent student, IUniversity university)\n        {\n" in content
        assert "            enrollmentStudentAssociation.Link(student, this);" in content
        assert "            enrollmentUniversityAssociation.Link(this, university);" in content

    def test_derived_accessor(self, renderer, relator_object_model_data):
        view_model = view_model_of(relator_object_model_data)

        student = renderer.render_class(view_model.find_class("Student"))
        university = renderer.render_class(view_model.find_class("University"))

        assert "        IEnumerable<IUniversity> Universities { get; }" in student
        assert (
            "return Enrollments.Select(relator => relator.University).Where(other => other != null).Distinct();"
        ) in student
        assert "        public virtual IStudent Students\n" in university
        assert "return relator == null ? null : relator.Student;" in university

    def test_base_constructor_call(self, renderer):
        sports_car = view_model_of(INHERITED_CTOR_OBJECT_MODEL).find_class("SportsCar")

        content = renderer.render_class(sports_car)

        assert "public interface ISportsCar : ICanValidate, ICar" in content
        assert "public class SportsCar : Car, ISportsCar" in content
        assert "public SportsCar(IEngine engine) : base(engine)" in content
        assert "carEngineAssociation" not in content

    def test_constraints_and_validation(self, renderer):
        model = ObjectModel(
            classes=[ClassInfo(name="Car"), ClassInfo(name="Wheel")],
            relations=[RelationInfo(
                name="wheels",
                source_end=RelationEndInfo(name="car", class_name="Car", min_items=0, max_items=1),
                target_end=RelationEndInfo(name="wheels", class_name="Wheel", min_items=3, max_items=4),
                is_inseparable=True,
            )],
        )
        car = view_model_of(model).find_class("Car")

        content = renderer.render_class(car)

        assert "        public const int WHEELS_MIN_ITEMS = 3;" in content
        assert "        public const int WHEELS_MAX_ITEMS = 4;" in content
        assert "            var wheelsCount = wheelsAssociation.GetTargets(this).Count();" in content
        assert "            if (wheelsCount < WHEELS_MIN_ITEMS) return false;" in content
        assert "            if (wheelsCount > WHEELS_MAX_ITEMS) return false;" in content
        assert "            if (deep && wheelsAssociation.GetTargets(this).Any(item => !item.IsValid(true))) return false;" in content
        assert "        public virtual void RemoveWheels(IWheel item)" in content
        assert "item.Invalidate();" in content

    def test_phase_implements_partition_relation(self, renderer):
        model = ObjectModel(
            classes=[
                ClassInfo(name="Person"),
                ClassInfo(name="Child", implementing=["LifePhase"]),
                ClassInfo(name="Adult", implementing=["LifePhase"]),
                ClassInfo(name="LifePhase", is_interface=True),
            ],
            relations=[RelationInfo(
                name="LifePhase",
                source_end=RelationEndInfo(name="Person", class_name="Person", min_items=1, max_items=1),
                target_end=RelationEndInfo(name="LifePhase", class_name="LifePhase", min_items=1, max_items=1),
                is_inseparable=True,
                is_part_initialized_with_whole=True,
            )],
        )
        view_model = view_model_of(model)

        life_phase = renderer.render_class(view_model.find_class("LifePhase"))
        child = renderer.render_class(view_model.find_class("Child"))

        assert "        IPerson Person { get; }" in life_phase
        assert "public interface IChild : ICanValidate, ILifePhase" in child
        assert (
            "        private static readonly Association<IPerson, ILifePhase> lifePhaseAssociation =\n"
            "            Association.Get<IPerson, ILifePhase>(\"LifePhase\", AssociationKind.OneToOne, false);"
        ) in child
        assert (
            "        public virtual IPerson Person\n"
            "        {\n"
            "            get { return lifePhaseAssociation.GetSources(this).SingleOrDefault(); }\n"
            "        }"
        ) in child

    def test_grouped_member_implements_interface_relation(self, renderer):
        model = ObjectModel(
            classes=[
                ClassInfo(name="Team"),
                ClassInfo(name="Player", implementing=["TeamMember"]),
                ClassInfo(name="Coach", implementing=["TeamMember"]),
                ClassInfo(name="TeamMember", is_interface=True),
            ],
            relations=[RelationInfo(
                name="TeamMembers",
                source_end=RelationEndInfo(name="Team", class_name="Team", min_items=0, max_items=-1),
                target_end=RelationEndInfo(name="TeamMember", class_name="TeamMember", min_items=0, max_items=-1),
            )],
        )

        player = renderer.render_class(view_model_of(model).find_class("Player"))

        assert "        public virtual IEnumerable<ITeam> Teams\n" in player
        assert "            get { return teamMembersAssociation.GetSources(this); }" in player
        assert "        public virtual void AddTeam(ITeam item)\n        {\n            teamMembersAssociation.Link(item, this);" in player
        assert "        public virtual void RemoveTeam(ITeam item)\n" in player
        assert player.count("teamMembersAssociation =") == 1

    def test_interface_has_no_implementation(self, renderer):
        model = ObjectModel(classes=[ClassInfo(name="AgePhase", is_interface=True)])
        age_phase = view_model_of(model).find_class("AgePhase")

        content = renderer.render_class(age_phase)

        assert content.startswith("public interface IAgePhase : ICanValidate")
        assert "class" not in content
