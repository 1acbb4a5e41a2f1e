"""
RefOntoUML XMI sample content for tests.
"""

REFONTOUML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<RefOntoUML:Model xmi:version="2.0" xmlns:xmi="http://www.omg.org/XMI" '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:RefOntoUML="http://nemo.inf.ufes.br/ontouml/refontouml" xmi:id="model" name="Model">\n'
)
REFONTOUML_FOOTER = '</RefOntoUML:Model>\n'


def refontouml_document(body: str) -> str:
    """Wrap packaged elements into a RefOntoUML model document."""
    return REFONTOUML_HEADER + body + REFONTOUML_FOOTER


# Person (Kind) with a mandatory name, Man (SubKind of Person), Husband (Role
# of Man), Marriage (Relator) mediating husbands. Nested in a package.
SIMPLE_REFONTOUML = refontouml_document("""
  <packagedElement xsi:type="RefOntoUML:Package" xmi:id="pkg" name="People">
    <packagedElement xsi:type="RefOntoUML:PrimitiveType" xmi:id="string" name="string"/>
    <packagedElement xsi:type="RefOntoUML:Kind" xmi:id="person" name="Person">
      <ownedAttribute xmi:id="person_name" name="name" type="string">
        <lowerValue xsi:type="RefOntoUML:LiteralInteger" xmi:id="person_name_l" value="1"/>
        <upperValue xsi:type="RefOntoUML:LiteralUnlimitedNatural" xmi:id="person_name_u" value="1"/>
      </ownedAttribute>
    </packagedElement>
    <packagedElement xsi:type="RefOntoUML:SubKind" xmi:id="man" name="Man">
      <generalization xmi:id="gen_man" general="person"/>
    </packagedElement>
    <packagedElement xsi:type="RefOntoUML:Role" xmi:id="husband" name="Husband">
      <generalization xmi:id="gen_husband" general="man"/>
    </packagedElement>
    <packagedElement xsi:type="RefOntoUML:Relator" xmi:id="marriage" name="Marriage"/>
    <packagedElement xsi:type="RefOntoUML:Mediation" xmi:id="husbands" name="husbands" isEssential="true">
      <ownedEnd xmi:id="husbands_src" name="marriages" type="marriage">
        <lowerValue xsi:type="RefOntoUML:LiteralInteger" xmi:id="husbands_src_l" value="0"/>
        <upperValue xsi:type="RefOntoUML:LiteralUnlimitedNatural" xmi:id="husbands_src_u" value="*"/>
      </ownedEnd>
      <ownedEnd xmi:id="husbands_tgt" name="husband" type="husband">
        <lowerValue xsi:type="RefOntoUML:LiteralInteger" xmi:id="husbands_tgt_l" value="1"/>
        <upperValue xsi:type="RefOntoUML:LiteralUnlimitedNatural" xmi:id="husbands_tgt_u" value="1"/>
      </ownedEnd>
    </packagedElement>
  </packagedElement>
""")

# Student and University (Kinds) connected through the Enrollment relator;
# studiesAt is derived from Enrollment.
DERIVATION_REFONTOUML = refontouml_document("""
  <packagedElement xsi:type="RefOntoUML:Kind" xmi:id="student" name="Student"/>
  <packagedElement xsi:type="RefOntoUML:Kind" xmi:id="university" name="University"/>
  <packagedElement xsi:type="RefOntoUML:Relator" xmi:id="enrollment" name="Enrollment"/>
  <packagedElement xsi:type="RefOntoUML:Mediation" xmi:id="enrollment_student" name="enrollmentStudent">
    <ownedEnd xmi:id="es_src" name="enrollments" type="enrollment">
      <lowerValue xmi:id="es_src_l" value="0"/>
      <upperValue xmi:id="es_src_u" value="*"/>
    </ownedEnd>
    <ownedEnd xmi:id="es_tgt" name="student" type="student">
      <lowerValue xmi:id="es_tgt_l" value="1"/>
      <upperValue xmi:id="es_tgt_u" value="1"/>
    </ownedEnd>
  </packagedElement>
  <packagedElement xsi:type="RefOntoUML:Mediation" xmi:id="enrollment_university" name="enrollmentUniversity">
    <ownedEnd xmi:id="eu_src" name="enrollments" type="enrollment">
      <lowerValue xmi:id="eu_src_l" value="0"/>
      <upperValue xmi:id="eu_src_u" value="*"/>
    </ownedEnd>
    <ownedEnd xmi:id="eu_tgt" name="university" type="university">
      <lowerValue xmi:id="eu_tgt_l" value="1"/>
      <upperValue xmi:id="eu_tgt_u" value="1"/>
    </ownedEnd>
  </packagedElement>
  <packagedElement xsi:type="RefOntoUML:MaterialAssociation" xmi:id="studies_at" name="studiesAt">
    <ownedEnd xmi:id="sa_src" name="students" type="student" isUnique="false">
      <lowerValue xmi:id="sa_src_l" value="0"/>
      <upperValue xmi:id="sa_src_u" value="*"/>
    </ownedEnd>
    <ownedEnd xmi:id="sa_tgt" name="universities" type="university">
      <lowerValue xmi:id="sa_tgt_l" value="0"/>
      <upperValue xmi:id="sa_tgt_u" value="*"/>
    </ownedEnd>
  </packagedElement>
  <packagedElement xsi:type="RefOntoUML:Derivation" xmi:id="derivation" name="studiesAtDerivation">
    <ownedEnd xmi:id="d_src" type="studies_at"/>
    <ownedEnd xmi:id="d_tgt" type="enrollment"/>
  </packagedElement>
""")

# Person (Kind) partitioned into the Child and Adult phases (disjoint, complete).
PHASE_PARTITION_REFONTOUML = refontouml_document("""
  <packagedElement xsi:type="RefOntoUML:Kind" xmi:id="person" name="Person"/>
  <packagedElement xsi:type="RefOntoUML:Phase" xmi:id="child" name="Child">
    <generalization xmi:id="gen_child" general="person" generalizationSet="age"/>
  </packagedElement>
  <packagedElement xsi:type="RefOntoUML:Phase" xmi:id="adult" name="Adult">
    <generalization xmi:id="gen_adult" general="person" generalizationSet="age"/>
  </packagedElement>
  <packagedElement xsi:type="RefOntoUML:GeneralizationSet" xmi:id="age" name="AgePhase"
      isCovering="true" isDisjoint="true" generalization="gen_child gen_adult"/>
""")

NOT_REFONTOUML = """<?xml version="1.0" encoding="UTF-8"?>
<uml:Model xmlns:uml="http://www.eclipse.org/uml2/5.0.0/UML" name="Other"/>
"""

MALFORMED_XML = "<RefOntoUML:Model xmlns:RefOntoUML='http://nemo.inf.ufes.br/ontouml/refontouml'><unclosed>"

UNRESOLVED_REFERENCE_REFONTOUML = refontouml_document("""
  <packagedElement xsi:type="RefOntoUML:SubKind" xmi:id="man" name="Man">
    <generalization xmi:id="gen_man" general="missing"/>
  </packagedElement>
""")

BILLION_LAUGHS = """<?xml version="1.0"?>
<!DOCTYPE lolz [
  <!ENTITY lol "lol">
  <!ENTITY lol2 "&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;">
]>
<RefOntoUML:Model xmlns:RefOntoUML="http://nemo.inf.ufes.br/ontouml/refontouml">&lol2;</RefOntoUML:Model>
"""
