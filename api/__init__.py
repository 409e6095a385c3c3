"""Demo routes for the Datastar SDK service."""
