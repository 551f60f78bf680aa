"""Core daily note logic: frontmatter codec, sections and storage."""
