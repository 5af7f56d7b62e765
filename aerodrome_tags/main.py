from __future__ import annotations

from fastapi import FastAPI

from aerodrome_tags.api.routers.contract_tags import router as contract_tags_router

app = FastAPI(title="Aerodrome Contract Tags API")
app.include_router(contract_tags_router)


@app.get("/health")
def health():
    return {"status": "ok"}
