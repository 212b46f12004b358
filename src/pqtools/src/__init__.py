"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/__init__.py

Internal package root for pqtools.

Internal modules:

- reader:     pyarrow-backed Parquet facade (schema, row count, row iterator)
- formatting: Arrow value → display text
- sampler:    uniform index sampling without replacement
- stream:     ordinal filter over a row stream
- output:     padded text table writer
- commands:   CLI command implementations (sample)
- app:        Typer CLI surface

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""
