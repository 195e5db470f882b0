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


from owlfunctional.base import *
from owlfunctional.model import *


class Annotation(Node):
  """An annotation: property, value (IRI, anonymous individual or literal) and its own annotations."""
  __slots__ = _fields = ("property", "value", "annotations")
  _defaults = ((),)


def read_annotation_subject(ctx):
  if ctx.at("BLANK_NODE"): return read_anonymous_individual(ctx)
  if ctx.at_iri(): return read_iri(ctx)
  raise ctx.unexpected(("FULL_IRI", "PNAME", "BLANK_NODE"), "annotation subject")

def read_annotation_value(ctx):
  if ctx.at("STRING"): return read_literal(ctx)
  if ctx.at("BLANK_NODE"): return read_anonymous_individual(ctx)
  if ctx.at_iri(): return read_iri(ctx)
  raise ctx.unexpected(("FULL_IRI", "PNAME", "BLANK_NODE", "STRING"), "annotation value")

def read_annotation(ctx):
  with ctx.nested:
    ctx.open("Annotation")
    annotations = read_annotations(ctx)
    property    = read_annotation_property(ctx)
    value       = read_annotation_value(ctx)
    ctx.close("Annotation")
  return Annotation(property, value, annotations)

def read_annotations(ctx):
  annotations = []
  while ctx.at_keyword("Annotation"): annotations.append(read_annotation(ctx))
  return annotations
