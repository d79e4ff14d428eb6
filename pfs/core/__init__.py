"""Core domain of Portfolio Service: models, errors, results, capabilities."""
