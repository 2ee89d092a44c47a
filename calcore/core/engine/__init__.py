"""Core arithmetic evaluation utilities.

Responsibilities:
  - Provide checked operations, outcome types and the evaluator entry point.
  - Must not parse strings; consumes already-resolved operands and OperationKind.
"""
