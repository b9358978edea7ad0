"""Infrastructure layer - HTTP transport, source clients, clipboard."""
