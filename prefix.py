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

from owlfunctional.base import *


_LOCAL_ESCAPE = re.compile(r"\\([_~.\-!$&'()*+,;=/?#@%])")

class PrefixTable(object):
  """Prefix declarations of a single document, mapping prefix names (without the trailing ':') to IRIs.

The empty name is the default prefix. Once frozen, the table is read-only."""
  def __init__(self, mapping = None):
    self._prefixes = {}
    self.frozen    = False
    if mapping:
      for name, iri in mapping.items(): self.declare(name, iri)

  def declare(self, name, iri):
    if self.frozen: raise OwlFunctionalError("Prefix table is frozen, cannot declare prefix '%s:'!" % name)
    if name in self._prefixes: raise OwlFunctionalDuplicatedPrefixError("duplicated prefix '%s:'" % name)
    self._prefixes[name] = iri

  def freeze(self):
    self.frozen = True
    return self

  def resolve(self, name):
    iri = self._prefixes.get(name)
    if iri is None: raise OwlFunctionalUndeclaredPrefixError("undeclared prefix '%s:'" % name)
    return iri

  def expand(self, pname):
    name, local = pname.split(":", 1)
    if "\\" in local: local = _LOCAL_ESCAPE.sub(r"\1", local)
    return self.resolve(name) + local

  def __contains__(self, name): return name in self._prefixes
  def __len__(self): return len(self._prefixes)

  def __repr__(self): return "<PrefixTable %s>" % " ".join("%s:=<%s>" % (name, iri) for name, iri in self._prefixes.items())


def as_prefix_table(prefixes):
  if isinstance(prefixes, PrefixTable): return prefixes
  return PrefixTable(prefixes).freeze()
