"""Services for Hackathon Scoring: storage, write-path validation and reporting."""
