class PayloadFormatError(ValueError):
    """Sollevata quando un payload API-Football non ha la forma attesa dalla normalizzazione."""
