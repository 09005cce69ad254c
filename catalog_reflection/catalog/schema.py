"""Schema metadata classes."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Column:
    """Column metadata."""

    name: str
    type_name: str
    typmod: Optional[int] = None
    nullable: bool = True
    default: Optional[str] = None
    position: Optional[int] = None
    table: Optional["Table"] = field(default=None, repr=False, compare=False)

    def qualified_name(self) -> str:
        """Get schema-qualified column name."""
        if self.table:
            return f"{self.table.qualified_name()}.{self.name}"
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type_name": self.type_name,
            "typmod": self.typmod,
            "nullable": self.nullable,
            "default": self.default,
            "position": self.position,
        }


@dataclass
class Index:
    """Index metadata.

    ``constraint_name`` and ``constraint_definition`` are only set when the
    index backs a declared PRIMARY KEY, UNIQUE or EXCLUDE constraint.
    """

    name: str
    definition: str
    primary: bool = False
    unique: bool = False
    oid: Optional[int] = None
    columns: List[str] = field(default_factory=list)
    predicate: Optional[str] = None
    constraint_name: Optional[str] = None
    constraint_definition: Optional[str] = None
    schema: Optional["Schema"] = field(default=None, repr=False, compare=False)
    table: Optional["Table"] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "schema": self.schema.name if self.schema else None,
            "primary": self.primary,
            "unique": self.unique,
            "columns": list(self.columns),
            "predicate": self.predicate,
            "definition": self.definition,
            "constraint_name": self.constraint_name,
            "constraint_definition": self.constraint_definition,
        }


@dataclass
class ForeignKey:
    """Foreign key metadata.

    Both ``table`` and ``foreign_table`` point at tables already registered
    in the same catalog.
    """

    name: str
    table: "Table" = field(repr=False, compare=False)
    columns: List[str]
    foreign_table: "Table" = field(repr=False, compare=False)
    foreign_columns: List[str]
    update_rule: str = "NO ACTION"
    delete_rule: str = "NO ACTION"
    match_rule: str = "SIMPLE"
    deferrable: bool = False
    initially_deferred: bool = False
    definition: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "columns": list(self.columns),
            "foreign_table": self.foreign_table.qualified_name(),
            "foreign_columns": list(self.foreign_columns),
            "update_rule": self.update_rule,
            "delete_rule": self.delete_rule,
            "match_rule": self.match_rule,
            "deferrable": self.deferrable,
            "initially_deferred": self.initially_deferred,
            "definition": self.definition,
        }


@dataclass
class Table:
    """Table (or view) metadata."""

    name: str
    schema: Optional["Schema"] = field(default=None, repr=False, compare=False)
    oid: Optional[int] = None
    columns: List[Column] = field(default_factory=list)
    indexes: Dict[str, Index] = field(default_factory=dict)
    foreign_keys: Dict[str, ForeignKey] = field(default_factory=dict)

    def __post_init__(self):
        # Set back-reference to table
        for col in self.columns:
            col.table = self

    def add_column(self, column: Column) -> Column:
        """Append a column, keeping source order."""
        column.table = self
        self.columns.append(column)
        return column

    def sort_columns(self) -> None:
        """Order columns by ordinal position; unnumbered columns keep their place at the end."""
        numbered = [col for col in self.columns if col.position is not None]
        unnumbered = [col for col in self.columns if col.position is None]
        numbered.sort(key=lambda col: col.position)
        self.columns = numbered + unnumbered

    def get_column(self, name: str) -> Optional[Column]:
        """Get column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def add_index(self, index: Index) -> Index:
        """Attach an index, replacing any index already known under that name."""
        index.table = self
        self.indexes[index.name] = index
        return index

    def add_foreign_key(self, fkey: ForeignKey) -> ForeignKey:
        fkey.table = self
        self.foreign_keys[fkey.name] = fkey
        return fkey

    def qualified_name(self) -> str:
        """Get schema-qualified table name."""
        if self.schema and self.schema.name:
            return f"{self.schema.name}.{self.name}"
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "oid": self.oid,
            "columns": [col.to_dict() for col in self.columns],
            "indexes": [idx.to_dict() for idx in self.indexes.values()],
            "foreign_keys": [fk.to_dict() for fk in self.foreign_keys.values()],
        }

    def __repr__(self) -> str:
        return f"Table({self.qualified_name()}, cols={len(self.columns)})"


@dataclass
class Schema:
    """Schema metadata.

    ``name`` is None for sources without schemas. ``target_name`` is the
    schema an object lands in at the destination when it differs from the
    source schema.
    """

    name: Optional[str]
    target_name: Optional[str] = None
    tables: Dict[str, Table] = field(default_factory=dict)
    views: Dict[str, Table] = field(default_factory=dict)

    def __post_init__(self):
        # Set back-reference to schema
        for table in self.tables.values():
            table.schema = self
        for view in self.views.values():
            view.schema = self

    def get_table(self, name: str) -> Optional[Table]:
        """Get table by name."""
        return self.tables.get(name)

    def get_view(self, name: str) -> Optional[Table]:
        """Get view by name."""
        return self.views.get(name)

    def add_table(self, table: Table) -> Table:
        """Add a table to this schema."""
        table.schema = self
        self.tables[table.name] = table
        return table

    def add_view(self, view: Table) -> Table:
        """Add a view to this schema."""
        view.schema = self
        self.views[view.name] = view
        return view

    def effective_target_name(self) -> Optional[str]:
        return self.target_name or self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "tables": [table.to_dict() for table in self.tables.values()],
            "views": [view.to_dict() for view in self.views.values()],
        }

    def __repr__(self) -> str:
        return f"Schema({self.name}, tables={len(self.tables)}, views={len(self.views)})"
