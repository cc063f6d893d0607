"""Request middleware: session authentication and rate limiting."""
