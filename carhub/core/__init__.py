"""Core package — settings, exceptions, and response envelopes shared by both apps."""
