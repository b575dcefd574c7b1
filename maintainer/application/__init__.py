"""Application layer: business services and the named filter contract."""
