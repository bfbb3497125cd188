import os

import uvicorn

from empire.app import create_app

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    uvicorn.run("empire.main:app", host="0.0.0.0", port=port, reload=True)
