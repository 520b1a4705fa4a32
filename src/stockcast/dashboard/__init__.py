"""Dashboard web layer: FastAPI JSON API and realtime WebSocket feed."""
