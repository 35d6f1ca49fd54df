"""HTTP trigger service for actionkit workflows."""
