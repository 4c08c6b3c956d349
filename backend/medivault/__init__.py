"""MediVault backend: medical document vault and symptom log API."""
