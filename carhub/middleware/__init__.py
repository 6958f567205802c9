"""HTTP middleware shared by both apps."""
