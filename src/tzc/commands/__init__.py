"""Click plumbing for the tzc command: base class, context, prompts."""
