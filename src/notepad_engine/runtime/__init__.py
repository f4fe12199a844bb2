"""Runtime services (telemetry, configuration) shared by the engine."""
