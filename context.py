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


import codecs

import owlfunctional.base
from owlfunctional.base import *
from owlfunctional.lexer import lex, locate


_DESCRIPTIONS = {
  "FULL_IRI"   : "IRI",
  "PNAME"      : "prefixed name",
  "STRING"     : "quoted string",
  "LANGTAG"    : "language tag",
  "BLANK_NODE" : "blank node",
  "INTEGER"    : "integer",
  "EOF"        : "end of input",
}

_BOM = chr(0xFEFF)

def decode_input(text, max_input_size = None):
  if max_input_size is None: max_input_size = owlfunctional.base.MAX_INPUT_SIZE
  if len(text) > max_input_size:
    raise OwlFunctionalInputTooLargeError("input too large (%s, maximum %s)" % (len(text), max_input_size))
  if isinstance(text, (bytes, bytearray)):
    data = bytes(text)
    bom  = len(codecs.BOM_UTF8) if data.startswith(codecs.BOM_UTF8) else 0
    try: text = data[bom:].decode("utf8")
    except UnicodeDecodeError as e:
      valid = data[bom : bom + e.start].decode("utf8")
      offset, line, column = locate(valid, len(valid))
      raise OwlFunctionalLexicalError("invalid UTF-8 byte sequence", bom + offset, line, column) from e
  elif text.startswith(_BOM): text = text[1:]
  return text


class _Nesting(object):
  def __init__(self, ctx): self.ctx = ctx

  def __enter__(self):
    ctx = self.ctx
    if ctx.depth >= ctx.max_depth:
      raise ctx.error(OwlFunctionalNestingError, "nesting too deep (maximum %s levels)" % ctx.max_depth)
    ctx.depth += 1

  def __exit__(self, exc_type = None, exc_val = None, exc_tb = None):
    self.ctx.depth -= 1


class ParseContext(object):
  """Token cursor shared by all the readers of a parse.

Holds the token stream, the (read-only) prefix table and the nesting depth.
``with ctx.nested:`` enters one nesting level."""
  def __init__(self, text, prefixes, max_depth = None):
    if max_depth is None: max_depth = owlfunctional.base.MAX_DEPTH
    tokens         = lex(text)
    self.text      = text
    self.types     = [token.gettokentype()       for token in tokens] + ["EOF"]
    self.values    = [token.getstr()             for token in tokens] + [""]
    self.indexes   = [token.getsourcepos().idx   for token in tokens] + [len(text)]
    self.pos       = 0
    self.prefixes  = prefixes
    self.max_depth = max_depth
    self.depth     = 0
    self.nested    = _Nesting(self)

  def type(self, offset = 0): return self.types[min(self.pos + offset, len(self.types) - 1)]
  def value(self): return self.values[self.pos]

  def at(self, type): return self.types[self.pos] == type
  def at_iri(self): return self.types[self.pos] in ("FULL_IRI", "PNAME")
  def at_keyword(self, keyword): return (self.types[self.pos] == "NAME") and (self.values[self.pos] == keyword)

  def keyword(self):
    if self.types[self.pos] == "NAME": return self.values[self.pos]

  def next(self):
    value = self.values[self.pos]
    if self.pos < len(self.types) - 1: self.pos += 1
    return value

  def expect(self, type, what):
    if self.types[self.pos] != type: raise self.unexpected((type,), what)
    return self.next()

  def open(self, keyword):
    if not self.at_keyword(keyword): raise self.unexpected((keyword,), keyword)
    self.pos += 1
    if self.types[self.pos] != "(":
      raise self.error(OwlFunctionalStructuralError, "'(' expected after %s, found %s" % (keyword, self.describe()), ("(",))
    self.pos += 1

  def close(self, keyword):
    type = self.types[self.pos]
    if type == ")":
      self.pos += 1
    elif type == "EOF":
      raise self.error(OwlFunctionalStructuralError, "missing ')' closing %s" % keyword, (")",))
    else:
      raise self.error(OwlFunctionalArityError, "too many operands in %s, found %s" % (keyword, self.describe()), (")",))

  def sequence(self, keyword, read_item, minimum = 0):
    items = []
    while not self.types[self.pos] in (")", "EOF"): items.append(read_item(self))
    if len(items) < minimum:
      # No operand starts with ')' or end of input: read_item fails, with the tokens it accepts
      expected = ()
      try:
        read_item(self)
      except OwlFunctionalParsingError as e:
        expected = e.expected
      raise self.error(OwlFunctionalArityError, "%s requires at least %s operand%s, %s given" % (keyword, minimum, "s" if minimum > 1 else "", len(items)), expected)
    return items

  def describe(self, pos = None):
    if pos is None: pos = self.pos
    type = self.types[pos]
    if type == "EOF": return "end of input"
    return "%s '%s'" % (_DESCRIPTIONS.get(type, "token") if type != "NAME" else "keyword", self.values[pos])

  def error(self, Error, message, expected = (), pos = None):
    if pos is None: pos = self.pos
    offset, line, column = locate(self.text, self.indexes[pos])
    return Error(message, offset, line, column, expected)

  def unexpected(self, expected, what):
    type = self.types[self.pos]
    if   type == ")":   Error = OwlFunctionalArityError;      message = "missing %s before ')'" % what
    elif type == "EOF": Error = OwlFunctionalStructuralError; message = "unexpected end of input, %s expected" % what
    else:               Error = OwlFunctionalStructuralError; message = "unexpected %s, %s expected" % (self.describe(), what)
    return self.error(Error, message, expected)

  def expect_end(self):
    if self.types[self.pos] != "EOF":
      raise self.error(OwlFunctionalStructuralError, "unexpected %s after end of input" % self.describe(), ("EOF",))
