# -*- coding: utf-8 -*-
# Owlfunctional
# Copyright (C) 2013-2019 Jean-Baptiste LAMY
# LIMICS (Laboratoire d'informatique médicale et d'ingénierie des connaissances en santé), UMR_S 1142
# University Paris 13, Sorbonne paris-Cité, Bobigny, France

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.

# You should have received a copy of the GNU Lesser General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


from owlfunctional.base            import *
from owlfunctional.model           import *
from owlfunctional.class_construct import *
from owlfunctional.annotation      import *


class Axiom(Node):
  """Base class of axioms. The last field of every axiom is its (possibly empty) tuple of annotations."""
  __slots__ = ()
  _defaults = ((),)

class ClassAxiom           (Axiom): __slots__ = ()
class ObjectPropertyAxiom  (Axiom): __slots__ = ()
class DataPropertyAxiom    (Axiom): __slots__ = ()
class Assertion            (Axiom): __slots__ = ()
class AnnotationAxiom      (Axiom): __slots__ = ()


class Declaration(Axiom):
  __slots__ = _fields = ("entity", "annotations")

class DatatypeDefinition(Axiom):
  __slots__ = _fields = ("datatype", "data_range", "annotations")

class HasKey(Axiom):
  __slots__ = _fields = ("class_expression", "object_properties", "data_properties", "annotations")


class SubClassOf(ClassAxiom):
  __slots__ = _fields = ("sub_class", "super_class", "annotations")

class EquivalentClasses(ClassAxiom):
  __slots__ = _fields = ("class_expressions", "annotations")

class DisjointClasses(ClassAxiom):
  __slots__ = _fields = ("class_expressions", "annotations")

class DisjointUnion(ClassAxiom):
  __slots__ = _fields = ("cls", "class_expressions", "annotations")


class ObjectPropertyChain(Node):
  __slots__ = _fields = ("properties",)

class SubObjectPropertyOf(ObjectPropertyAxiom):
  """sub_property is an object property expression or an ObjectPropertyChain."""
  __slots__ = _fields = ("sub_property", "super_property", "annotations")

class EquivalentObjectProperties(ObjectPropertyAxiom):
  __slots__ = _fields = ("properties", "annotations")

class DisjointObjectProperties(ObjectPropertyAxiom):
  __slots__ = _fields = ("properties", "annotations")

class InverseObjectProperties(ObjectPropertyAxiom):
  __slots__ = _fields = ("first", "second", "annotations")

class ObjectPropertyDomain(ObjectPropertyAxiom):
  __slots__ = _fields = ("property", "domain", "annotations")

class ObjectPropertyRange(ObjectPropertyAxiom):
  __slots__ = _fields = ("property", "range", "annotations")

class FunctionalObjectProperty       (ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")
class InverseFunctionalObjectProperty(ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")
class ReflexiveObjectProperty        (ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")
class IrreflexiveObjectProperty      (ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")
class SymmetricObjectProperty        (ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")
class AsymmetricObjectProperty       (ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")
class TransitiveObjectProperty       (ObjectPropertyAxiom): __slots__ = _fields = ("property", "annotations")


class SubDataPropertyOf(DataPropertyAxiom):
  __slots__ = _fields = ("sub_property", "super_property", "annotations")

class EquivalentDataProperties(DataPropertyAxiom):
  __slots__ = _fields = ("properties", "annotations")

class DisjointDataProperties(DataPropertyAxiom):
  __slots__ = _fields = ("properties", "annotations")

class DataPropertyDomain(DataPropertyAxiom):
  __slots__ = _fields = ("property", "domain", "annotations")

class DataPropertyRange(DataPropertyAxiom):
  __slots__ = _fields = ("property", "range", "annotations")

class FunctionalDataProperty(DataPropertyAxiom):
  __slots__ = _fields = ("property", "annotations")


class SameIndividual(Assertion):
  __slots__ = _fields = ("individuals", "annotations")

class DifferentIndividuals(Assertion):
  __slots__ = _fields = ("individuals", "annotations")

class ClassAssertion(Assertion):
  __slots__ = _fields = ("class_expression", "individual", "annotations")

class ObjectPropertyAssertion        (Assertion): __slots__ = _fields = ("property", "source", "target", "annotations")
class NegativeObjectPropertyAssertion(Assertion): __slots__ = _fields = ("property", "source", "target", "annotations")
class DataPropertyAssertion          (Assertion): __slots__ = _fields = ("property", "source", "target", "annotations")
class NegativeDataPropertyAssertion  (Assertion): __slots__ = _fields = ("property", "source", "target", "annotations")


class AnnotationAssertion(AnnotationAxiom):
  __slots__ = _fields = ("property", "subject", "value", "annotations")

class SubAnnotationPropertyOf(AnnotationAxiom):
  __slots__ = _fields = ("sub_property", "super_property", "annotations")

class AnnotationPropertyDomain(AnnotationAxiom):
  __slots__ = _fields = ("property", "domain", "annotations")

class AnnotationPropertyRange(AnnotationAxiom):
  __slots__ = _fields = ("property", "range", "annotations")



def _axiom(Axiom, *read_operands):
  keyword = Axiom.__name__
  def read(ctx):
    ctx.open(keyword)
    annotations = read_annotations(ctx)
    operands    = [read_operand(ctx) for read_operand in read_operands]
    ctx.close(keyword)
    return Axiom(*operands, annotations)
  return read

def _n_ary_axiom(Axiom, read_operand, *read_leading_operands):
  keyword = Axiom.__name__
  def read(ctx):
    ctx.open(keyword)
    annotations = read_annotations(ctx)
    operands    = [read_operand(ctx) for read_operand in read_leading_operands]
    operands.append(ctx.sequence(keyword, read_operand, 2))
    ctx.close(keyword)
    return Axiom(*operands, annotations)
  return read

def _read_sub_object_property_expression(ctx):
  if ctx.at_keyword("ObjectPropertyChain"):
    with ctx.nested:
      ctx.open("ObjectPropertyChain")
      properties = ctx.sequence("ObjectPropertyChain", read_object_property_expression, 2)
      ctx.close("ObjectPropertyChain")
    return ObjectPropertyChain(properties)
  return read_object_property_expression(ctx)

def _bracketed(read_item):
  def read(ctx):
    if not ctx.at("("): raise ctx.unexpected(("(",), "'(' opening a property list of HasKey")
    ctx.next()
    items = ctx.sequence("HasKey", read_item)
    ctx.close("HasKey")
    return items
  return read


AXIOMS = {
  "Declaration"                     : _axiom(Declaration, read_entity),
  "DatatypeDefinition"              : _axiom(DatatypeDefinition, read_datatype, read_data_range),
  "HasKey"                          : _axiom(HasKey, read_class_expression, _bracketed(read_object_property_expression), _bracketed(read_data_property)),

  "SubClassOf"                      : _axiom(SubClassOf, read_class_expression, read_class_expression),
  "EquivalentClasses"               : _n_ary_axiom(EquivalentClasses, read_class_expression),
  "DisjointClasses"                 : _n_ary_axiom(DisjointClasses,   read_class_expression),
  "DisjointUnion"                   : _n_ary_axiom(DisjointUnion,     read_class_expression, read_class),

  "SubObjectPropertyOf"             : _axiom(SubObjectPropertyOf, _read_sub_object_property_expression, read_object_property_expression),
  "EquivalentObjectProperties"      : _n_ary_axiom(EquivalentObjectProperties, read_object_property_expression),
  "DisjointObjectProperties"        : _n_ary_axiom(DisjointObjectProperties,   read_object_property_expression),
  "InverseObjectProperties"         : _axiom(InverseObjectProperties, read_object_property_expression, read_object_property_expression),
  "ObjectPropertyDomain"            : _axiom(ObjectPropertyDomain,    read_object_property_expression, read_class_expression),
  "ObjectPropertyRange"             : _axiom(ObjectPropertyRange,     read_object_property_expression, read_class_expression),

  "SubDataPropertyOf"               : _axiom(SubDataPropertyOf, read_data_property, read_data_property),
  "EquivalentDataProperties"        : _n_ary_axiom(EquivalentDataProperties, read_data_property),
  "DisjointDataProperties"          : _n_ary_axiom(DisjointDataProperties,   read_data_property),
  "DataPropertyDomain"              : _axiom(DataPropertyDomain,     read_data_property, read_class_expression),
  "DataPropertyRange"               : _axiom(DataPropertyRange,      read_data_property, read_data_range),
  "FunctionalDataProperty"          : _axiom(FunctionalDataProperty, read_data_property),

  "SameIndividual"                  : _n_ary_axiom(SameIndividual,       read_individual),
  "DifferentIndividuals"            : _n_ary_axiom(DifferentIndividuals, read_individual),
  "ClassAssertion"                  : _axiom(ClassAssertion, read_class_expression, read_individual),
  "ObjectPropertyAssertion"         : _axiom(ObjectPropertyAssertion,         read_object_property_expression, read_individual, read_individual),
  "NegativeObjectPropertyAssertion" : _axiom(NegativeObjectPropertyAssertion, read_object_property_expression, read_individual, read_individual),
  "DataPropertyAssertion"           : _axiom(DataPropertyAssertion,           read_data_property, read_individual, read_literal),
  "NegativeDataPropertyAssertion"   : _axiom(NegativeDataPropertyAssertion,   read_data_property, read_individual, read_literal),

  "AnnotationAssertion"             : _axiom(AnnotationAssertion,      read_annotation_property, read_annotation_subject, read_annotation_value),
  "SubAnnotationPropertyOf"         : _axiom(SubAnnotationPropertyOf,  read_annotation_property, read_annotation_property),
  "AnnotationPropertyDomain"        : _axiom(AnnotationPropertyDomain, read_annotation_property, read_iri),
  "AnnotationPropertyRange"         : _axiom(AnnotationPropertyRange,  read_annotation_property, read_iri),
}

for _Axiom in (FunctionalObjectProperty, InverseFunctionalObjectProperty, ReflexiveObjectProperty, IrreflexiveObjectProperty,
               SymmetricObjectProperty, AsymmetricObjectProperty, TransitiveObjectProperty):
  AXIOMS[_Axiom.__name__] = _axiom(_Axiom, read_object_property_expression)
del _Axiom
