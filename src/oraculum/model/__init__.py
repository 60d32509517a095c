"""
Model - Value types decoded from JSON-RPC results.

- receipt: transaction receipts, event logs and run-log classification
- schemas: JSON Schema registry (schema_files/v1) used to validate raw results
"""
