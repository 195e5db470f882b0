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

import re

import rply

from owlfunctional.base import *

# SPARQL 1.1 / Turtle character classes, used for prefixed names and blank node labels
def _char_ranges(*ranges): return "".join("%s-%s" % (chr(start), chr(end)) for start, end in ranges)

_PN_CHARS_BASE = "A-Za-z" + _char_ranges((0xC0, 0xD6), (0xD8, 0xF6), (0xF8, 0x2FF), (0x370, 0x37D), (0x37F, 0x1FFF),
                                         (0x200C, 0x200D), (0x2070, 0x218F), (0x2C00, 0x2FEF), (0x3001, 0xD7FF),
                                         (0xF900, 0xFDCF), (0xFDF0, 0xFFFD), (0x10000, 0xEFFFF))
_PN_CHARS_U    = _PN_CHARS_BASE + "_"
_PN_CHARS      = _PN_CHARS_U + r"\-0-9" + chr(0xB7) + _char_ranges((0x300, 0x36F), (0x203F, 0x2040))
_PLX           = r"%[0-9A-Fa-f]{2}|\\[_~.\-!$&'()*+,;=/?#@%]"
_PN_PREFIX     = r"[%s](?:[%s.]*[%s])?" % (_PN_CHARS_BASE, _PN_CHARS, _PN_CHARS)
_PN_LOCAL      = r"(?:[%s:0-9]|%s)(?:(?:[%s.:]|%s)*(?:[%s:]|%s))?" % (_PN_CHARS_U, _PLX, _PN_CHARS, _PLX, _PN_CHARS, _PLX)

_LEXER = None
def _create_lexer():
  global _LEXER

  lg = rply.LexerGenerator()
  lg.add("(",          r"\(")
  lg.add(")",          r"\)")
  lg.add("=",          r"=")
  lg.add("^^",         r"\^\^")
  lg.add("FULL_IRI",   r'<[^<>"{}|^`\\\x00-\x20]*>')
  lg.add("STRING",     r'"(?:[^"\\]|\\.)*"', re.DOTALL)
  lg.add("LANGTAG",    r"@[a-zA-Z]+(?:-[a-zA-Z0-9]+)*")
  lg.add("BLANK_NODE", r"_:[%s0-9](?:[%s.]*[%s])?" % (_PN_CHARS_U, _PN_CHARS, _PN_CHARS))
  lg.add("PNAME",      r"(?:%s)?:(?:%s)?" % (_PN_PREFIX, _PN_LOCAL))
  lg.add("INTEGER",    r"[0-9]+")
  lg.add("NAME",       r"[A-Za-z][A-Za-z0-9]*")

  lg.ignore(r"\s+")
  lg.ignore(r"#[^\r\n]*")

  _LEXER = lg.build()


def locate(text, index):
  """Returns (UTF-8 byte offset, line, column) for the character at index; line and column start at 1."""
  line_start = text.rfind("\n", 0, index) + 1
  return len(text[:index].encode("utf8")), text.count("\n", 0, index) + 1, index - line_start + 1

def _lexical_error_message(text, index):
  c = text[index : index + 1]
  if   c == '"':                          return "unterminated quoted string"
  elif c == "<":                          return "malformed IRI"
  elif c == "@":                          return "malformed language tag"
  elif text[index : index + 2] == "_:":   return "malformed blank node label"
  return "unexpected character %r" % c

def lex(text):
  """Splits text into a list of rply tokens, whitespace and comments excluded."""
  if _LEXER is None: _create_lexer()
  try:
    return list(_LEXER.lex(text))
  except rply.LexingError as e:
    index = e.getsourcepos().idx
    offset, line, column = locate(text, index)
    raise OwlFunctionalLexicalError(_lexical_error_message(text, index), offset, line, column) from e
