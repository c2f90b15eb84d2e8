import enum


@enum.unique
class SymbolKind(enum.Enum):
  terminal = enum.auto()
  non_terminal = enum.auto()
