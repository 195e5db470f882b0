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


import time

from owlfunctional.base            import *
from owlfunctional.base            import _log
from owlfunctional.prefix          import *
from owlfunctional.context         import *
from owlfunctional.model           import *
from owlfunctional.class_construct import *
from owlfunctional.annotation      import *
from owlfunctional.axiom           import *
from owlfunctional.rule            import *


class PrefixDeclaration(Node):
  __slots__ = _fields = ("name", "iri")

class Ontology(Node):
  """An ontology: optional IRI and version IRI, imports, annotations and elements (axioms, rules and
description graphs) in document order."""
  __slots__ = _fields = ("iri", "version_iri", "imports", "annotations", "axioms")
  _defaults = (None, None, (), (), ())

  def axioms_of(self, *kinds): return [axiom for axiom in self.axioms if isinstance(axiom, kinds)]

  @property
  def rules(self): return self.axioms_of(Rule)

  @property
  def description_graphs(self): return self.axioms_of(DescriptionGraph)

class Document(Node):
  __slots__ = _fields = ("prefixes", "ontology")

  def prefix_mapping(self): return { prefix.name : prefix.iri for prefix in self.prefixes }


ELEMENTS = dict(AXIOMS)
ELEMENTS.update(RULES)

def read_element(ctx):
  reader = ELEMENTS.get(ctx.keyword())
  if reader is None: raise ctx.unexpected(ELEMENTS, "axiom")
  return reader(ctx)

def _read_prefix_declaration(ctx):
  ctx.open("Prefix")
  pos  = ctx.pos
  type = ctx.type()
  if type == "PNAME":
    name, local = ctx.value().split(":", 1)
    if local: raise ctx.error(OwlFunctionalStructuralError, "invalid prefix name '%s'" % ctx.value(), ("PNAME", "NAME", "="))
    ctx.next()
  elif type == "NAME": name = ctx.next()
  elif type == "=":    name = ""
  else: raise ctx.unexpected(("PNAME", "NAME", "="), "prefix name")
  ctx.expect("=", "'='")
  iri = IRI(ctx.expect("FULL_IRI", "IRI")[1:-1])
  ctx.close("Prefix")

  try:
    ctx.prefixes.declare(name, iri)
  except OwlFunctionalPrefixError as e:
    raise ctx.error(e.__class__, e.message, pos = pos) from e
  _log(2, "prefix '%s:' = <%s>" % (name, iri))
  return PrefixDeclaration(name, iri)

def _read_import(ctx):
  ctx.open("Import")
  iri = read_iri(ctx)
  ctx.close("Import")
  return iri

def read_ontology(ctx):
  ctx.open("Ontology")
  iri = version_iri = None
  if ctx.at_iri():
    iri = read_iri(ctx)
    if ctx.at_iri():
      version_iri = read_iri(ctx)
      if ctx.at_iri(): raise ctx.error(OwlFunctionalStructuralError, "too many IRIs in ontology header (ontology IRI and version IRI expected)")
  imports = []
  while ctx.at_keyword("Import"): imports.append(_read_import(ctx))
  annotations = read_annotations(ctx)
  axioms      = ctx.sequence("Ontology", read_element)
  ctx.close("Ontology")
  return Ontology(iri, version_iri, imports, annotations, axioms)

def read_document(ctx):
  prefixes = []
  while ctx.at_keyword("Prefix"): prefixes.append(_read_prefix_declaration(ctx))
  ctx.prefixes.freeze()
  ontology = read_ontology(ctx)
  return Document(prefixes, ontology)


def _read_all(ctx, read):
  try:
    result = read(ctx)
  except RecursionError as e:
    # max_depth beyond what the Python stack allows
    raise ctx.error(OwlFunctionalNestingError, "nesting too deep (Python recursion limit reached)") from e
  ctx.expect_end()
  return result

def parse(text, max_depth = None, max_input_size = None):
  """Parses an OWL 2 functional-syntax document (str or UTF-8 bytes) and returns a Document.

Raises an OwlFunctionalParsingError subclass, with position, on the first error."""
  t0       = time.time()
  text     = decode_input(text, max_input_size)
  ctx      = ParseContext(text, PrefixTable(), max_depth)
  document = _read_all(ctx, read_document)
  _log(1, "parsed ontology %s: %s prefixes, %s imports, %s axioms in %.3f s" % (
    "<%s>" % document.ontology.iri if document.ontology.iri else "(anonymous)",
    len(document.prefixes), len(document.ontology.imports), len(document.ontology.axioms), time.time() - t0))
  return document


def _parse_fragment(read, text, prefixes, max_depth):
  ctx = ParseContext(decode_input(text), as_prefix_table(prefixes), max_depth)
  return _read_all(ctx, read)

def parse_class_expression(text, prefixes = None, max_depth = None): return _parse_fragment(read_class_expression, text, prefixes, max_depth)
def parse_data_range      (text, prefixes = None, max_depth = None): return _parse_fragment(read_data_range,       text, prefixes, max_depth)
def parse_axiom           (text, prefixes = None, max_depth = None): return _parse_fragment(read_element,          text, prefixes, max_depth)
def parse_literal         (text, prefixes = None): return _parse_fragment(read_literal, text, prefixes, None)
def parse_iri             (text, prefixes = None): return _parse_fragment(read_iri,     text, prefixes, None)
