"""HTTP primitives: request, response sink, response objects, MIME table."""
