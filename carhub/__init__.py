"""Carhub — vehicle registry and pricing lookup microservices."""
