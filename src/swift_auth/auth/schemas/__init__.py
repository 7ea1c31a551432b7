"""Identity service wire schemas (Keystone v2 and v3)."""
