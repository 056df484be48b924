"""Settings package for the Cameinw project.

`base.py` contains configuration shared across environments; `dev.py`,
`test.py` and `prod.py` extend it with environment specific overrides.
"""
