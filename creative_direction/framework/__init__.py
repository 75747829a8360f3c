"""Project-specific framework utilities.

This package holds the structural pieces shared by the engine and the app layer
(typed config parsing, the input/output data model, ranked selection results,
anti-repetition memory and result records). It intentionally excludes catalog
content and scoring rules.

Common entrypoints:

- `creative_direction.framework.config`: `EngineConfig.from_dict`
- `creative_direction.framework.records`: `PromptResult` and CSV/JSON export
"""
