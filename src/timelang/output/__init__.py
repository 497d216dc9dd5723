"""Output layer — human (Rich) and machine (JSON) views of ServiceResult."""
