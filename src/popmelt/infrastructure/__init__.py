"""Infrastructure layer — the Supabase store adapter and the backend that owns it."""
