"""Catalog queries run against the PostgreSQL system catalogs.

Templates carrying ``{including}``/``{excluding}`` slots receive the
clauses built by :func:`catalog_reflection.filters.predicates.filter_clause`;
every value is bound through ``%s`` placeholders.
"""

SYSTEM_SCHEMAS_FILTER = "{column} !~ '^pg_' AND {column} <> 'information_schema'"

LIST_SCHEMAS = """
SELECT nspname
  FROM pg_catalog.pg_namespace
 WHERE {system_filter}
 ORDER BY nspname
""".format(system_filter=SYSTEM_SCHEMAS_FILTER.format(column="nspname"))

CURRENT_SCHEMA = "SELECT current_schema()"

TABLE_SCHEMA = """
SELECT n.nspname
  FROM pg_catalog.pg_class c
       JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
 WHERE c.oid = %s::regclass
"""

TABLE_OIDS = """
SELECT t.name, t.name::regclass::oid
  FROM unnest(%s::text[]) AS t(name)
"""

LIST_COLUMNS = """
SELECT n.nspname,
       c.relname,
       c.oid,
       a.attnum,
       a.attname,
       pg_catalog.format_type(a.atttypid, NULL),
       a.atttypmod,
       a.attnotnull,
       pg_catalog.pg_get_expr(d.adbin, d.adrelid)
  FROM pg_catalog.pg_class c
       JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
       JOIN pg_catalog.pg_attribute a ON a.attrelid = c.oid
       LEFT JOIN pg_catalog.pg_attrdef d
              ON d.adrelid = a.attrelid AND d.adnum = a.attnum
 WHERE c.relkind = ANY(%s::"char"[])
   AND a.attnum > 0
   AND NOT a.attisdropped
   AND {system_filter}
   {{including}}
   {{excluding}}
 ORDER BY n.nspname, c.relname, a.attnum
""".format(system_filter=SYSTEM_SCHEMAS_FILTER.format(column="n.nspname"))

LIST_INDEXES = """
SELECT n.nspname,
       i.relname,
       i.oid,
       rn.nspname,
       r.relname,
       x.indisprimary,
       x.indisunique,
       (SELECT string_agg(a.attname, ',' ORDER BY k.ord)
          FROM unnest(x.indkey::int2[]) WITH ORDINALITY AS k(attnum, ord)
               JOIN pg_catalog.pg_attribute a
                 ON a.attrelid = x.indrelid AND a.attnum = k.attnum),
       pg_catalog.pg_get_expr(x.indpred, x.indrelid),
       pg_catalog.pg_get_indexdef(x.indexrelid),
       c.conname,
       pg_catalog.pg_get_constraintdef(c.oid)
  FROM pg_catalog.pg_index x
       JOIN pg_catalog.pg_class i ON i.oid = x.indexrelid
       JOIN pg_catalog.pg_namespace n ON n.oid = i.relnamespace
       JOIN pg_catalog.pg_class r ON r.oid = x.indrelid
       JOIN pg_catalog.pg_namespace rn ON rn.oid = r.relnamespace
       LEFT JOIN pg_catalog.pg_constraint c
              ON c.conindid = x.indexrelid
             AND c.conrelid = x.indrelid
             AND c.contype IN ('p', 'u', 'x')
 WHERE r.relkind IN ('r', 'p')
   AND {system_filter}
   {{including}}
   {{excluding}}
 ORDER BY rn.nspname, r.relname, i.relname
""".format(system_filter=SYSTEM_SCHEMAS_FILTER.format(column="rn.nspname"))

# Self-referencing keys (conrelid = confrelid) are never listed.
LIST_FOREIGN_KEYS = """
SELECT n.nspname,
       c.relname,
       nf.nspname,
       cf.relname,
       r.conname,
       (SELECT string_agg(a.attname, ',' ORDER BY k.ord)
          FROM unnest(r.conkey) WITH ORDINALITY AS k(attnum, ord)
               JOIN pg_catalog.pg_attribute a
                 ON a.attrelid = r.conrelid AND a.attnum = k.attnum),
       (SELECT string_agg(a.attname, ',' ORDER BY k.ord)
          FROM unnest(r.confkey) WITH ORDINALITY AS k(attnum, ord)
               JOIN pg_catalog.pg_attribute a
                 ON a.attrelid = r.confrelid AND a.attnum = k.attnum),
       r.confupdtype,
       r.confdeltype,
       r.confmatchtype,
       r.condeferrable,
       r.condeferred,
       pg_catalog.pg_get_constraintdef(r.oid, true)
  FROM pg_catalog.pg_constraint r
       JOIN pg_catalog.pg_class c ON c.oid = r.conrelid
       JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
       JOIN pg_catalog.pg_class cf ON cf.oid = r.confrelid
       JOIN pg_catalog.pg_namespace nf ON nf.oid = cf.relnamespace
 WHERE r.contype = 'f'
   AND r.conrelid <> r.confrelid
   AND {system_filter}
   {{including}}
   {{excluding}}
   {{foreign_including}}
 ORDER BY n.nspname, c.relname, r.conname
""".format(system_filter=SYSTEM_SCHEMAS_FILTER.format(column="n.nspname"))
