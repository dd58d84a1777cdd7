# Entry point for ASGI hosts: they import `app` from here.
import uvicorn

from app.main import app

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=False)
