"""Query records: timestamping, serialization and the query engine."""
