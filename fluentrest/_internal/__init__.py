"""Internal modules for fluentrest.

These modules back the public builder and client. Import from
``fluentrest`` instead of reaching in here from application code.

Modules:
    request - Request builder, executor and response parsers
    http - Shared HTTP client configuration and status classification
"""
