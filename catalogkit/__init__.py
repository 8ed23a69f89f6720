"""
catalogkit - in-memory book catalog and collection helpers.

Functional core lives in catalogkit.components; rules, adapters and
app_shell form the imperative shell around it.
"""
