"""Service layer: playground operations returning ServiceResult."""
