"""Desktop editor for JSON blueprint documents."""
