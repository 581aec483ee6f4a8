"""Generation clients, prompts and model-output recovery."""
