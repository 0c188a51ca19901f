"""Quick check that the API loads and the health endpoint reports the catalog key."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient
from app.api.main import app

client = TestClient(app)
r = client.get("/api/health")
print("Health status:", r.status_code)
print("Response:", r.json())
if not r.json().get("api_key_configured"):
    print("MOVIE_API_KEY is not set; /api/fetch-movies will return 500")
