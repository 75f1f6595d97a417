"""Request dispatch, result serialization, error responses and serving."""
