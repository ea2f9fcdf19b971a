"""
Read-only breed catalog.

Responsibilities:
- Load raw breed records from a static CSV dataset.
- Normalize size and group labels into the canonical BreedProfile schema.
- Derive each breed's characteristic vector from its group, honouring any
  explicit trait values the record carries.
- Keep the loaded catalog in memory for the ranking layer.
"""
