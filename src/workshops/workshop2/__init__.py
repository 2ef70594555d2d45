"""Workshop 2: templates, static files, forms and CSRF protection."""
