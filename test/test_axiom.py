import sys, os, unittest

from owlfunctional import *


set_log_level(0)

EX     = "http://example.org/"
PREFIX = { "ex" : EX, "xsd" : XSD, "rdfs" : RDFS }

def ax(text): return parse_axiom(text, PREFIX)
def iri(name): return IRI(EX + name)


class Test(unittest.TestCase):
  def assert_arity_error(self, text):
    ok = 0
    try:    ax(text)
    except OwlFunctionalArityError: ok = 1
    assert ok, text

  def test_declaration_1(self):
    for keyword, Entity in [("Class", Class), ("Datatype", Datatype), ("ObjectProperty", ObjectProperty),
                            ("DataProperty", DataProperty), ("AnnotationProperty", AnnotationProperty),
                            ("NamedIndividual", NamedIndividual)]:
      a = ax("Declaration(%s(ex:X))" % keyword)
      assert a == Declaration(Entity(iri("X")))
      assert a.annotations == ()

  def test_declaration_2(self):
    ok = 0
    try:    ax("Declaration(Thing(ex:X))")
    except OwlFunctionalStructuralError as e: ok = "NamedIndividual" in e.expected
    assert ok
    self.assert_arity_error("Declaration()")
    self.assert_arity_error("Declaration(Class(ex:X) Class(ex:Y))")

  def test_class_axiom_1(self):
    a = ax("SubClassOf(ex:Man ObjectSomeValuesFrom(ex:hasParent ex:Person))")
    assert a.sub_class   == Class(iri("Man"))
    assert a.super_class == ObjectSomeValuesFrom(ObjectProperty(iri("hasParent")), Class(iri("Person")))
    assert isinstance(a, ClassAxiom)

  def test_class_axiom_2(self):
    self.assert_arity_error("SubClassOf(ex:A)")
    self.assert_arity_error("SubClassOf(ex:A ex:B ex:C)")
    for keyword in ["EquivalentClasses", "DisjointClasses"]:
      self.assert_arity_error("%s(ex:A)" % keyword)
      assert len(ax("%s(ex:A ex:B)" % keyword).class_expressions) == 2

  def test_class_axiom_3(self):
    a = ax("DisjointUnion(ex:Child ex:Boy ex:Girl)")
    assert a.cls == Class(iri("Child"))
    assert a.class_expressions == (Class(iri("Boy")), Class(iri("Girl")))
    self.assert_arity_error("DisjointUnion(ex:Child ex:Boy)")

  def test_object_property_axiom_1(self):
    a = ax("SubObjectPropertyOf(ex:hasMother ex:hasParent)")
    assert a.sub_property   == ObjectProperty(iri("hasMother"))
    assert a.super_property == ObjectProperty(iri("hasParent"))

    a = ax("SubObjectPropertyOf(ObjectPropertyChain(ex:hasParent ObjectInverseOf(ex:hasChild)) ex:hasSibling)")
    assert a.sub_property == ObjectPropertyChain([ObjectProperty(iri("hasParent")), ObjectInverseOf(ObjectProperty(iri("hasChild")))])

    self.assert_arity_error("SubObjectPropertyOf(ObjectPropertyChain(ex:hasParent) ex:hasSibling)")

  def test_object_property_axiom_2(self):
    a = ax("InverseObjectProperties(ex:hasChild ex:hasParent)")
    assert (a.first, a.second) == (ObjectProperty(iri("hasChild")), ObjectProperty(iri("hasParent")))
    self.assert_arity_error("InverseObjectProperties(ex:hasChild)")
    self.assert_arity_error("InverseObjectProperties(ex:hasChild ex:hasParent ex:hasFather)")
    for keyword in ["EquivalentObjectProperties", "DisjointObjectProperties"]:
      self.assert_arity_error("%s(ex:p)" % keyword)
      assert len(ax("%s(ex:p ex:q)" % keyword).properties) == 2

  def test_object_property_axiom_3(self):
    for keyword in ["FunctionalObjectProperty", "InverseFunctionalObjectProperty", "ReflexiveObjectProperty",
                    "IrreflexiveObjectProperty", "SymmetricObjectProperty", "AsymmetricObjectProperty",
                    "TransitiveObjectProperty"]:
      a = ax("%s(ex:p)" % keyword)
      assert a.__class__.__name__ == keyword
      assert a.property == ObjectProperty(iri("p"))
      self.assert_arity_error("%s()" % keyword)
      self.assert_arity_error("%s(ex:p ex:q)" % keyword)

  def test_object_property_axiom_4(self):
    a = ax("ObjectPropertyDomain(ex:hasChild ex:Person)")
    assert a.domain == Class(iri("Person"))
    a = ax("ObjectPropertyRange(ObjectInverseOf(ex:hasChild) ex:Person)")
    assert a.property == ObjectInverseOf(ObjectProperty(iri("hasChild")))
    assert a.range    == Class(iri("Person"))

  def test_data_property_axiom_1(self):
    assert ax("SubDataPropertyOf(ex:hasName ex:hasLabel)").super_property == DataProperty(iri("hasLabel"))
    assert ax("DataPropertyDomain(ex:hasAge ex:Person)").domain == Class(iri("Person"))
    assert ax("DataPropertyRange(ex:hasAge xsd:integer)").range == Datatype(IRI(xsd_integer))
    assert ax("FunctionalDataProperty(ex:hasAge)").property == DataProperty(iri("hasAge"))
    for keyword in ["EquivalentDataProperties", "DisjointDataProperties"]:
      self.assert_arity_error("%s(ex:p)" % keyword)
      assert ax("%s(ex:p ex:q)" % keyword).properties == (DataProperty(iri("p")), DataProperty(iri("q")))

  def test_datatype_definition_1(self):
    a = ax('DatatypeDefinition(ex:Adult DatatypeRestriction(xsd:integer xsd:minInclusive "18"^^xsd:integer))')
    assert a.datatype == Datatype(iri("Adult"))
    assert isinstance(a.data_range, DatatypeRestriction)

  def test_has_key_1(self):
    a = ax("HasKey(ex:Person (ex:hasMother ex:hasFather) (ex:hasSSN))")
    assert a.class_expression  == Class(iri("Person"))
    assert a.object_properties == (ObjectProperty(iri("hasMother")), ObjectProperty(iri("hasFather")))
    assert a.data_properties   == (DataProperty(iri("hasSSN")),)

    a = ax("HasKey(ex:Person () ())")
    assert a.object_properties == a.data_properties == ()

  def test_has_key_2(self):
    ok = 0
    try:    ax("HasKey(ex:Person ex:hasSSN)")
    except OwlFunctionalStructuralError as e: ok = "(" in e.expected
    assert ok

  def test_assertion_1(self):
    assert ax("SameIndividual(ex:John ex:Johnny)").individuals == (NamedIndividual(iri("John")), NamedIndividual(iri("Johnny")))
    self.assert_arity_error("SameIndividual(ex:John)")
    self.assert_arity_error("DifferentIndividuals(ex:John)")

    ok = 0
    try:    ax("SameIndividual(ex:John)")
    except OwlFunctionalArityError as e: ok = e.expected == frozenset(["FULL_IRI", "PNAME", "BLANK_NODE"])
    assert ok

    a = ax("ClassAssertion(ObjectComplementOf(ex:Woman) _:someone)")
    assert a.individual == AnonymousIndividual("someone")

  def test_assertion_2(self):
    a = ax("NegativeObjectPropertyAssertion(ex:hasChild ex:Mary ex:Bill)")
    assert (a.source, a.target) == (NamedIndividual(iri("Mary")), NamedIndividual(iri("Bill")))
    a = ax('DataPropertyAssertion(ex:hasAge ex:John "42"^^xsd:integer)')
    assert a.target.to_python() == 42
    a = ax('NegativeDataPropertyAssertion(ex:hasAge ex:John "5"^^xsd:integer)')
    assert isinstance(a, Assertion)
    self.assert_arity_error("DataPropertyAssertion(ex:hasAge ex:John)")

  def test_annotation_axiom_1(self):
    a = ax('AnnotationAssertion(rdfs:label ex:John "John"@en)')
    assert a.property == AnnotationProperty(IRI(RDFS + "label"))
    assert a.subject  == iri("John")
    assert a.value    == LanguageTaggedLiteral("John", "en")

    a = ax("AnnotationAssertion(rdfs:seeAlso _:x ex:Other)")
    assert a.subject == AnonymousIndividual("x")
    assert a.value   == iri("Other")

  def test_annotation_axiom_2(self):
    assert ax("SubAnnotationPropertyOf(ex:a ex:b)").sub_property == AnnotationProperty(iri("a"))
    assert ax("AnnotationPropertyDomain(ex:a ex:Person)").domain == iri("Person")
    assert ax("AnnotationPropertyRange(ex:a xsd:string)").range  == IRI(xsd_string)

  def test_annotation_1(self):
    a = ax('SubClassOf(Annotation(rdfs:comment "first") Annotation(rdfs:comment "second") ex:A ex:B)')
    assert [annotation.value.lexical for annotation in a.annotations] == ["first", "second"]
    assert a.sub_class == Class(iri("A"))

  def test_annotation_2(self):
    n    = 50
    text = 'Annotation(ex:p "v0")'
    for i in range(1, n): text = 'Annotation(%s ex:p "v%s")' % (text, i)
    a = ax('AnnotationAssertion(%s rdfs:label ex:Subject "value")' % text)
    assert a.value == PlainLiteral("value")
    assert len(a.annotations) == 1
    annotation = a.annotations[0]
    for i in reversed(range(n)):
      assert annotation.property == AnnotationProperty(iri("p"))
      assert annotation.value    == PlainLiteral("v%s" % i)
      if i: annotation = annotation.annotations[0]
    assert annotation.annotations == ()

  def test_annotation_3(self):
    text = 'Annotation(ex:p "v")'
    for i in range(200): text = 'Annotation(%s ex:p "v")' % text
    ok = 0
    try:    ax('AnnotationAssertion(%s rdfs:label ex:Subject "value")' % text)
    except OwlFunctionalNestingError: ok = 1
    assert ok

  def test_annotation_4(self):
    self.assert_arity_error('SubClassOf(Annotation(rdfs:comment) ex:A ex:B)')

  def test_unknown_1(self):
    ok = 0
    try:    ax("SubClassOff(ex:A ex:B)")
    except OwlFunctionalStructuralError as e: ok = ("SubClassOf" in e.expected) and ("DLSafeRule" in e.expected)
    assert ok


if __name__ == '__main__': unittest.main()
