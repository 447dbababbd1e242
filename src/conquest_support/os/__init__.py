"""Host capabilities: system clipboard and platform URL opener."""
