"""tsdb-platform: first-run onboarding for a multi-tenant time-series platform."""
