import sys, os, unittest

from owlfunctional import *


set_log_level(0)

EX     = "http://example.org/"
PREFIX = { "ex" : EX, "xsd" : XSD, "rdf" : RDF }

def ce(text): return parse_class_expression(text, PREFIX)
def dr(text): return parse_data_range(text, PREFIX)

def nested(keyword, n, leaf = "<http://a>"): return "%s(" % keyword * n + leaf + ")" * n


class Test(unittest.TestCase):
  def assert_arity_error(self, f, text):
    ok = 0
    try:    f(text)
    except OwlFunctionalArityError: ok = 1
    assert ok, text

  def test_class_1(self):
    c = ce("ex:Person")
    assert c == Class(IRI(EX + "Person"))
    assert c.iri.prefixed_name == "ex:Person"
    assert ce("<http://a>").iri.prefixed_name is None

  def test_intersection_1(self):
    c = ce("ObjectIntersectionOf(<http://a> <http://b>)")
    assert isinstance(c, ObjectIntersectionOf)
    assert c.operands == (Class(IRI("http://a")), Class(IRI("http://b")))

  def test_intersection_2(self):
    self.assert_arity_error(ce, "ObjectIntersectionOf(<http://a>)")
    self.assert_arity_error(ce, "ObjectIntersectionOf()")

  def test_arity_1(self):
    for keyword in ["ObjectIntersectionOf", "ObjectUnionOf"]:
      self.assert_arity_error(ce, "%s(ex:A)" % keyword)
      assert len(ce("%s(ex:A ex:B)" % keyword).operands) == 2
      assert len(ce("%s(ex:A ex:B ex:C)" % keyword).operands) == 3
    for keyword in ["DataIntersectionOf", "DataUnionOf"]:
      self.assert_arity_error(dr, "%s(xsd:integer)" % keyword)
      assert len(dr("%s(xsd:integer xsd:string)" % keyword).operands) == 2

  def test_arity_2(self):
    self.assert_arity_error(ce, "ObjectComplementOf()")
    self.assert_arity_error(ce, "ObjectComplementOf(ex:A ex:B)")
    self.assert_arity_error(ce, "ObjectOneOf()")
    self.assert_arity_error(ce, "ObjectSomeValuesFrom(ex:p)")
    self.assert_arity_error(ce, "ObjectHasSelf(ex:p ex:A)")
    self.assert_arity_error(dr, "DataOneOf()")
    self.assert_arity_error(dr, "DataComplementOf()")
    self.assert_arity_error(dr, "DatatypeRestriction(xsd:integer)")

  def test_union_1(self):
    c = ce("ObjectUnionOf(ex:A ObjectComplementOf(ex:B))")
    assert c == ObjectUnionOf([Class(IRI(EX + "A")), ObjectComplementOf(Class(IRI(EX + "B")))])

  def test_one_of_1(self):
    c = ce("ObjectOneOf(ex:John _:b1)")
    assert c.individuals == (NamedIndividual(IRI(EX + "John")), AnonymousIndividual("b1"))

  def test_restriction_1(self):
    c = ce("ObjectSomeValuesFrom(ObjectInverseOf(ex:hasChild) ex:Person)")
    assert c.property == ObjectInverseOf(ObjectProperty(IRI(EX + "hasChild")))
    assert c.filler   == Class(IRI(EX + "Person"))

    c = ce("ObjectAllValuesFrom(ex:hasChild ObjectUnionOf(ex:Man ex:Woman))")
    assert isinstance(c.filler, ObjectUnionOf)

  def test_restriction_2(self):
    c = ce("ObjectHasValue(ex:hasChild ex:John)")
    assert c.individual == NamedIndividual(IRI(EX + "John"))
    c = ce("ObjectHasSelf(ex:loves)")
    assert c.property == ObjectProperty(IRI(EX + "loves"))

  def test_cardinality_1(self):
    c = ce("ObjectMinCardinality(2 ex:hasChild)")
    assert c.cardinality == 2
    assert c.filler is None
    assert c.effective_filler == Class(IRI(owl_thing))

    c = ce("ObjectExactCardinality(1 ex:hasChild ex:Person)")
    assert c.filler == c.effective_filler == Class(IRI(EX + "Person"))

    c = ce("DataMaxCardinality(1 ex:hasAge)")
    assert c.effective_filler == Datatype(IRI(rdfs_literal))
    c = ce("DataMaxCardinality(1 ex:hasAge xsd:integer)")
    assert c.filler == Datatype(IRI(xsd_integer))

  def test_cardinality_2(self):
    assert ce("ObjectMaxCardinality(4294967295 ex:p)").cardinality == 4294967295
    ok = 0
    try:    ce("ObjectMaxCardinality(4294967296 ex:p)")
    except OwlFunctionalLexicalError as e: ok = "out of range" in e.message
    assert ok

  def test_cardinality_4(self):
    try:
      ce("ObjectMinCardinality(%s ex:p)" % ("9" * 5000))
    except OwlFunctionalLexicalError as e:
      assert "out of range" in e.message
      assert (e.line, e.column) == (1, 22)
    else: assert False

    assert ce("ObjectMinCardinality(0000000000000000000007 ex:p)").cardinality == 7
    assert ce("ObjectMinCardinality(0 ex:p)").cardinality == 0

  def test_cardinality_3(self):
    ok = 0
    try:    ce("ObjectMinCardinality(ex:p ex:A)")
    except OwlFunctionalStructuralError as e: ok = "INTEGER" in e.expected
    assert ok

  def test_data_values_from_1(self):
    c = ce("DataSomeValuesFrom(ex:hasAge <http://www.w3.org/2001/XMLSchema#integer>)")
    assert c.properties == (DataProperty(IRI(EX + "hasAge")),)
    assert c.filler     == Datatype(IRI(xsd_integer))

  def test_data_values_from_2(self):
    c = ce("DataAllValuesFrom(ex:p ex:q xsd:integer)")
    assert c.properties == (DataProperty(IRI(EX + "p")), DataProperty(IRI(EX + "q")))
    assert c.filler     == Datatype(IRI(xsd_integer))

    c = ce("DataSomeValuesFrom(ex:p DataOneOf(\"a\" \"b\"))")
    assert c.properties == (DataProperty(IRI(EX + "p")),)
    assert c.filler     == DataOneOf([PlainLiteral("a"), PlainLiteral("b")])

  def test_data_values_from_3(self):
    self.assert_arity_error(ce, "DataSomeValuesFrom(xsd:integer)")
    self.assert_arity_error(ce, "DataAllValuesFrom(DataOneOf(\"a\"))")

  def test_data_has_value_1(self):
    c = ce('DataHasValue(ex:hasAge "42"^^xsd:integer)')
    assert c.literal == TypedLiteral("42", IRI(xsd_integer))

  def test_data_range_1(self):
    d = dr("DataComplementOf(DataUnionOf(xsd:integer xsd:string))")
    assert d == DataComplementOf(DataUnionOf([Datatype(IRI(xsd_integer)), Datatype(IRI(xsd_string))]))

  def test_data_range_2(self):
    d = dr('DatatypeRestriction(xsd:integer xsd:minInclusive "5"^^xsd:integer xsd:maxExclusive "10"^^xsd:integer)')
    assert d.datatype == Datatype(IRI(xsd_integer))
    assert [r.facet for r in d.restrictions] == [XSD + "minInclusive", XSD + "maxExclusive"]
    assert d.restrictions[0].literal.to_python() == 5

    d = dr('DatatypeRestriction(rdf:PlainLiteral rdf:langRange "en")')
    assert d.restrictions[0].facet == rdf_lang_range

  def test_data_range_3(self):
    ok = 0
    try:    dr('DatatypeRestriction(xsd:integer ex:notAFacet "5")')
    except OwlFunctionalStructuralError as e: ok = "invalid facet" in e.message
    assert ok

  def test_nesting_1(self):
    c = ce(nested("ObjectComplementOf", 128))
    for i in range(128): c = c.operand
    assert c == Class(IRI("http://a"))

  def test_nesting_2(self):
    ok = 0
    try:    ce(nested("ObjectComplementOf", 129))
    except OwlFunctionalNestingError as e: ok = "nesting too deep" in e.message
    assert ok

    assert parse_class_expression(nested("ObjectComplementOf", 129), max_depth = 200)

  def test_nesting_3(self):
    ok = 0
    text = nested("ObjectSomeValuesFrom", 20000, "ex:A").replace("ObjectSomeValuesFrom(", "ObjectSomeValuesFrom(ex:p ")
    try:    ce(text)
    except OwlFunctionalNestingError: ok = 1
    assert ok

  def test_nesting_4(self):
    ok = 0
    try:    dr(nested("DataComplementOf", 500, "xsd:integer"))
    except OwlFunctionalNestingError: ok = 1
    assert ok

  def test_nesting_5(self):
    text = nested("ObjectSomeValuesFrom", 5000, "ex:A").replace("ObjectSomeValuesFrom(", "ObjectSomeValuesFrom(ex:p ")
    ok = 0
    try:    parse_class_expression(text, PREFIX, max_depth = 10000)
    except OwlFunctionalNestingError as e: ok = ("nesting too deep" in e.message) and (e.line == 1)
    assert ok

  def test_expected_4(self):
    try:
      ce("ObjectIntersectionOf(<http://a>)")
    except OwlFunctionalArityError as e:
      assert "ObjectUnionOf" in e.expected
      assert "FULL_IRI"      in e.expected
    else: assert False

    try:
      dr("DataOneOf()")
    except OwlFunctionalArityError as e:
      assert e.expected == frozenset(["STRING"])
    else: assert False

    try:
      dr("DatatypeRestriction(xsd:integer)")
    except OwlFunctionalArityError as e:
      assert e.expected == frozenset(["FULL_IRI", "PNAME"])
    else: assert False

  def test_expected_1(self):
    try:
      ce("ObjectUnionOf(ex:A 5)")
    except OwlFunctionalStructuralError as e:
      assert "ObjectIntersectionOf" in e.expected
      assert "FULL_IRI" in e.expected
      assert "PNAME"    in e.expected
      assert e.column == 20
    else: assert False

  def test_expected_2(self):
    ok = 0
    try:    ce("ObjectUnionOf(ex:A ex:B")
    except OwlFunctionalStructuralError as e: ok = "missing ')'" in e.message
    assert ok

  def test_expected_3(self):
    ok = 0
    try:    ce("ex:A ex:B")
    except OwlFunctionalStructuralError as e: ok = e.expected == frozenset(["EOF"])
    assert ok

  def test_prefix_1(self):
    ok = 0
    try:    parse_class_expression("unknown:Thing")
    except OwlFunctionalUndeclaredPrefixError: ok = 1
    assert ok

  def test_node_1(self):
    c1 = ce("ObjectIntersectionOf(ex:A ex:B)")
    c2 = ce("ObjectIntersectionOf(<http://example.org/A> <http://example.org/B>)")
    assert c1 == c2
    assert hash(c1) == hash(c2)
    assert c1 != ce("ObjectUnionOf(ex:A ex:B)")
    assert len({ c1, c2 }) == 1

  def test_node_2(self):
    c = ce("ObjectComplementOf(ex:A)")
    ok = 0
    try:    c.operand = None
    except AttributeError: ok = 1
    assert ok
    assert repr(c) == "ObjectComplementOf(Class(<http://example.org/A>))"


if __name__ == '__main__': unittest.main()
