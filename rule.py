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


class Variable(Node):
  __slots__ = _fields = ("iri",)

  def __repr__(self): return "?%s" % self.iri


class Atom(Node):
  __slots__ = ()

class ClassAtom(Atom):
  __slots__ = _fields = ("class_expression", "argument")

class DataRangeAtom(Atom):
  __slots__ = _fields = ("data_range", "argument")

class ObjectPropertyAtom(Atom):
  __slots__ = _fields = ("property", "first", "second")

class DataPropertyAtom(Atom):
  __slots__ = _fields = ("property", "first", "second")

class BuiltInAtom(Atom):
  __slots__ = _fields = ("iri", "arguments")

class SameIndividualAtom(Atom):
  __slots__ = _fields = ("first", "second")

class DifferentIndividualsAtom(Atom):
  __slots__ = _fields = ("first", "second")


class Rule(Node):
  __slots__ = ()
  _defaults = ((),)

  def __str__(self): return "%s -> %s" % (", ".join(repr(atom) for atom in self.body), ", ".join(repr(atom) for atom in self.head))

class DLSafeRule(Rule):
  __slots__ = _fields = ("body", "head", "annotations")

class DescriptionGraphRule(Rule):
  __slots__ = _fields = ("body", "head", "annotations")


class NodeAssertion(Node):
  __slots__ = _fields = ("cls", "node")

class EdgeAssertion(Node):
  __slots__ = _fields = ("property", "source", "target")

class DescriptionGraph(Node):
  __slots__ = _fields = ("iri", "nodes", "edges", "main_classes", "annotations")
  _defaults = ((),)



def _read_variable(ctx):
  ctx.open("Variable")
  iri = read_iri(ctx)
  ctx.close("Variable")
  return Variable(iri)

def _read_i_argument(ctx):
  if ctx.at_keyword("Variable"): return _read_variable(ctx)
  if ctx.at("BLANK_NODE") or ctx.at_iri(): return read_individual(ctx)
  raise ctx.unexpected(("Variable", "FULL_IRI", "PNAME", "BLANK_NODE"), "individual argument")

def _read_d_argument(ctx):
  if ctx.at_keyword("Variable"): return _read_variable(ctx)
  if ctx.at("STRING"): return read_literal(ctx)
  raise ctx.unexpected(("Variable", "STRING"), "data argument")

def _atom(Atom, *read_operands):
  keyword = Atom.__name__
  def read(ctx):
    ctx.open(keyword)
    operands = [read_operand(ctx) for read_operand in read_operands]
    ctx.close(keyword)
    return Atom(*operands)
  return read

def _read_built_in_atom(ctx):
  ctx.open("BuiltInAtom")
  iri       = read_iri(ctx)
  arguments = ctx.sequence("BuiltInAtom", _read_d_argument, 1)
  ctx.close("BuiltInAtom")
  return BuiltInAtom(iri, arguments)

ATOMS = {
  "ClassAtom"                : _atom(ClassAtom,                read_class_expression, _read_i_argument),
  "DataRangeAtom"            : _atom(DataRangeAtom,            read_data_range, _read_d_argument),
  "ObjectPropertyAtom"       : _atom(ObjectPropertyAtom,       read_object_property_expression, _read_i_argument, _read_i_argument),
  "DataPropertyAtom"         : _atom(DataPropertyAtom,         read_data_property, _read_i_argument, _read_d_argument),
  "BuiltInAtom"              : _read_built_in_atom,
  "SameIndividualAtom"       : _atom(SameIndividualAtom,       _read_i_argument, _read_i_argument),
  "DifferentIndividualsAtom" : _atom(DifferentIndividualsAtom, _read_i_argument, _read_i_argument),
}

DESCRIPTION_GRAPH_ATOMS = {
  "ClassAtom"                : ATOMS["ClassAtom"],
  "ObjectPropertyAtom"       : ATOMS["ObjectPropertyAtom"],
}

def _atom_list(keyword, atoms):
  def read_atom(ctx):
    reader = atoms.get(ctx.keyword())
    if reader is None: raise ctx.unexpected(atoms, "atom")
    with ctx.nested: return reader(ctx)

  def read(ctx):
    ctx.open(keyword)
    items = ctx.sequence(keyword, read_atom)
    ctx.close(keyword)
    return items
  return read

def _rule(Rule, atoms):
  keyword   = Rule.__name__
  read_body = _atom_list("Body", atoms)
  read_head = _atom_list("Head", atoms)
  def read(ctx):
    ctx.open(keyword)
    annotations = read_annotations(ctx)
    body        = read_body(ctx)
    head        = read_head(ctx)
    ctx.close(keyword)
    return Rule(body, head, annotations)
  return read


def _group(keyword, read_item):
  def read(ctx):
    ctx.open(keyword)
    items = ctx.sequence(keyword, read_item, 1)
    ctx.close(keyword)
    return items
  return read

_read_nodes        = _group("Nodes",       _atom(NodeAssertion, read_class, read_iri))
_read_edges        = _group("Edges",       _atom(EdgeAssertion, read_object_property, read_iri, read_iri))
_read_main_classes = _group("MainClasses", read_class)

def _read_description_graph(ctx):
  ctx.open("DescriptionGraph")
  annotations  = read_annotations(ctx)
  iri          = read_iri(ctx)
  nodes        = _read_nodes(ctx)
  edges        = _read_edges(ctx)
  main_classes = _read_main_classes(ctx)
  ctx.close("DescriptionGraph")
  return DescriptionGraph(iri, nodes, edges, main_classes, annotations)


RULES = {
  "DLSafeRule"           : _rule(DLSafeRule,           ATOMS),
  "DescriptionGraphRule" : _rule(DescriptionGraphRule, DESCRIPTION_GRAPH_ATOMS),
  "DescriptionGraph"     : _read_description_graph,
}
