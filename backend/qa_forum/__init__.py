"""qa_forum — question API of a Q&A forum (list, detail, upsert, delete, selected answer)."""
