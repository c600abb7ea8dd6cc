"""Study assistant backend: document chunking and chunk retrieval."""
