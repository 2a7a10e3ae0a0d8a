"""Output layer — render ServiceResult envelopes for humans or machines."""
