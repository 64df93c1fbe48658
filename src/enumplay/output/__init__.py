"""Output layer: Rich, quiet and JSON rendering of ServiceResult."""
