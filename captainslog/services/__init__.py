"""Service layer: alert engine, maintenance schedule, digest, email, auth."""
