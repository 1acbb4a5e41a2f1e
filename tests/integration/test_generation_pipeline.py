"""
End-to-end generation tests.

Runs the complete pipeline from RefOntoUML or Object Model JSON input to
C# and Object Model JSON output.
"""

import json

import pytest

from ontogen.core.pipeline import GenerationPipeline, PipelineState, UnknownFormError
from ontogen.shared.models import GeneratorOptions


@pytest.fixture
def pipeline():
    return GenerationPipeline()


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


@pytest.mark.integration
class TestRefOntoUmlToCSharp:
    """RefOntoUML input rendered as C#."""

    def test_single_file(self, pipeline, tmp_path, temp_refontouml_file):
        output = tmp_path / "Model.cs"

        result = pipeline.run(GeneratorOptions(
            input=temp_refontouml_file,
            output=str(output),
            single_file=True,
            configuration={"namespace": "people.model"},
        ))

        assert result.stats.state == PipelineState.COMPLETED
        assert result.stats.classes == 4
        assert result.stats.relations == 2
        assert result.stats.files_written == 1
        content = output.read_text(encoding="utf-8")
        assert "namespace People.Model\n{" in content
        assert "public class Man : Person, IMan" in content
        assert "public Marriage(IHusband husband)" in content
        assert "husbandsAssociation.Link(husband, this);" in content

    def test_role_owner_relation(self, pipeline, tmp_path, temp_refontouml_file):
        result = pipeline.run(GeneratorOptions(input=temp_refontouml_file, output=str(tmp_path)))

        roles = result.object_model.find_relation("HusbandRoles")
        assert roles.source_end.class_name == "Man"
        assert roles.target_end.class_name == "Husband"
        man = (tmp_path / "Man.cs").read_text(encoding="utf-8")
        assert "IEnumerable<IHusband> HusbandRoles { get; }" in man
        assert "Association.Get<IMan, IHusband>(\"HusbandRoles\", AssociationKind.OneToMany, true);" in man

    def test_phase_partition(self, pipeline, tmp_path, temp_phase_refontouml_file):
        pipeline.run(GeneratorOptions(input=temp_phase_refontouml_file, output=str(tmp_path)))

        assert sorted(p.name for p in tmp_path.glob("*.cs")) == [
            "Adult.cs", "Child.cs", "IAgePhase.cs", "ICanValidate.cs", "Person.cs",
        ]
        person = (tmp_path / "Person.cs").read_text(encoding="utf-8")
        assert "public Person(IAgePhase agePhase)" in person
        assert "agePhaseAssociation.Link(this, agePhase);" in person
        child = (tmp_path / "Child.cs").read_text(encoding="utf-8")
        assert "public interface IChild : ICanValidate, IAgePhase" in child
        assert "public virtual IPerson Person\n" in child

    def test_derived_relation(self, pipeline, tmp_path, derivation_refontouml):
        model_file = write(tmp_path, "university.refontouml", derivation_refontouml)
        output = tmp_path / "Model.cs"

        result = pipeline.run(GeneratorOptions(input=model_file, output=str(output), single_file=True))

        assert result.object_model.find_relation("studiesAt").derived_from == "Enrollment"
        assert result.object_model.find_relation("studiesAtDerivation") is None
        content = output.read_text(encoding="utf-8")
        assert "IEnumerable<IUniversity> Universities { get; }" in content
        assert "IEnumerable<IStudent> Students { get; }" in content

    def test_type_mapping(self, pipeline, tmp_path, temp_refontouml_file):
        mapping = write(tmp_path, "types.json", json.dumps({"string": "String"}))
        output = tmp_path / "Model.cs"

        pipeline.run(GeneratorOptions(input=temp_refontouml_file, output=str(output),
                                      single_file=True, type_mapping=mapping))

        assert "String Name { get; set; }" in output.read_text(encoding="utf-8")


@pytest.mark.integration
class TestObjectModelForms:
    """Object Model JSON as output and as input."""

    def test_object_model_output(self, pipeline, tmp_path, temp_refontouml_file):
        output = tmp_path / "model.json"

        pipeline.run(GeneratorOptions(input=temp_refontouml_file, output=str(output),
                                      output_form="onto-object-model"))

        data = json.loads(output.read_text(encoding="utf-8"))
        assert [clazz["name"] for clazz in data["classes"]] == ["Person", "Man", "Husband", "Marriage"]
        assert data["classes"][1]["superClass"] == "Person"
        assert "superClass" not in data["classes"][0]

    def test_object_model_input_gives_same_code(self, pipeline, tmp_path, temp_refontouml_file):
        """Generating through the JSON Object Model yields the same C# code."""
        json_file = tmp_path / "model.json"
        direct = tmp_path / "Direct.cs"
        indirect = tmp_path / "Indirect.cs"

        pipeline.run(GeneratorOptions(input=temp_refontouml_file, output=str(direct), single_file=True))
        pipeline.run(GeneratorOptions(input=temp_refontouml_file, output=str(json_file),
                                      output_form="onto-object-model"))
        result = pipeline.run(GeneratorOptions(input=str(json_file), output=str(indirect), single_file=True,
                                               input_form="onto-object-model"))

        assert result.stats.state == PipelineState.COMPLETED
        assert indirect.read_text(encoding="utf-8") == direct.read_text(encoding="utf-8")


@pytest.mark.integration
class TestPipelineErrors:
    """Error propagation out of the pipeline."""

    def test_unknown_form(self, pipeline, temp_refontouml_file):
        with pytest.raises(UnknownFormError) as exc_info:
            pipeline.run(GeneratorOptions(input=temp_refontouml_file, output="out", output_form="java"))

        assert exc_info.value.kind == "output"
        assert "csharp-model" in str(exc_info.value)

    def test_missing_input(self, pipeline, tmp_path):
        with pytest.raises(FileNotFoundError):
            pipeline.run(GeneratorOptions(input=str(tmp_path / "missing.refontouml"), output=str(tmp_path)))
