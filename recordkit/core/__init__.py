"""Core building blocks: logging, errors, typed reads, SEO names and the database layer."""
