"""
Pydantic Schemas for Serialized Syntax Trees.

Defines the JSON exchange format produced by the external parser. Every node is
an object with a ``kind`` tag; fields not used by a known kind are kept so
unsupported constructs can still be dumped.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExpressionDoc(BaseModel):
  """
  One expression node.

  Kinds: ``lit_num`` (value: int), ``lit_str`` (value: str), ``var`` (name),
  ``call_fun`` (name, args). Any other kind is unsupported.
  """

  model_config = ConfigDict(extra="allow")

  kind: str = Field(..., description="Node tag.")
  value: Any = Field(None, description="Literal payload for lit_num / lit_str.")
  name: Optional[str] = Field(None, description="Identifier for var, callee for call_fun.")
  args: List["ExpressionDoc"] = Field(default_factory=list, description="Call arguments.")


class StatementDoc(BaseModel):
  """
  One statement node.

  Kinds: ``def_fun`` / ``def_cmd`` (name, params, body), ``def_var`` (name,
  value), ``call_cmd`` (name, args), ``return`` (value). Any other kind is
  unsupported.
  """

  model_config = ConfigDict(extra="allow")

  kind: str = Field(..., description="Node tag.")
  name: Optional[str] = None
  params: List[str] = Field(default_factory=list)
  body: List["StatementDoc"] = Field(default_factory=list)
  args: List[ExpressionDoc] = Field(default_factory=list)
  value: Optional[ExpressionDoc] = None


class ProgramDoc(BaseModel):
  """
  Root document: top-level declarations and an optional symbol set.
  """

  statements: List[StatementDoc] = Field(default_factory=list)
  symbols: Optional[List[str]] = Field(None, description="Known routine names. Derived from definitions when omitted.")


ExpressionDoc.model_rebuild()
StatementDoc.model_rebuild()
