"""Service layer: wraps compile and evaluate for host adapters.

Every public service method returns a ServiceResult.
"""
