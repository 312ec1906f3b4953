"""FastAPI application for the decipher service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import Depends, FastAPI, HTTPException, Request
from shared.config.config import config
from shared.domain.models import DecipherRequest, DecipherResponse, StatsResponse
from shared.domain.consts import ResultStatus, NO_RESULT_MARKER
from decipher.infrastructure.passwords_table import PasswordsTable, load_passwords_table
from decipher.services.formatter import decipher_text

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def get_passwords_table(request: Request) -> PasswordsTable:
    """
    Dependency returning the table loaded for this app.
    
    Raises:
        HTTPException: If the app has not finished startup (503 status).
    """
    table = getattr(request.app.state, "passwords_table", None)
    if table is None:
        raise HTTPException(status_code=503, detail="Passwords table not loaded")
    return table


def create_app(table: Optional[PasswordsTable] = None) -> FastAPI:
    """
    Create the decipher app.
    
    When no table is given, the precomputed passwords file from
    config.PASSWORDS_FILE is loaded once at startup.
    """
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "passwords_table", None) is None:
            app.state.passwords_table = load_passwords_table(config.PASSWORDS_FILE)
        logger.info(
            "Decipher service ready: %d passwords known (%s)",
            app.state.passwords_table.count,
            app.state.passwords_table.load_status.value,
        )
        yield
    
    app = FastAPI(title="NPC Decipher Service", lifespan=lifespan)
    app.state.passwords_table = table
    
    @app.get("/health")
    async def health_check() -> dict:
        """
        Health check endpoint for Docker healthchecks.
        
        Returns:
            Dict with status "ok" if service is healthy.
        """
        return {"status": "ok"}
    
    @app.get("/stats", response_model=StatsResponse)
    async def stats_endpoint(
        table: PasswordsTable = Depends(get_passwords_table),
    ) -> StatsResponse:
        """Number of known passwords and how the table was loaded."""
        return StatsResponse(password_count=table.count, load_status=table.load_status)
    
    @app.post("/decipher", response_model=DecipherResponse)
    async def decipher_endpoint(
        payload: DecipherRequest,
        table: PasswordsTable = Depends(get_passwords_table),
    ) -> DecipherResponse:
        """
        Replace the trailing hash of every line with its password when known.
        
        Returns:
            DecipherResponse with DECIPHERED and the rebuilt text, or NO_RESULT
            and the "no result" marker when the text held no lines.
        """
        try:
            outcome = decipher_text(table, payload.text)
            
            if outcome.is_empty:
                return DecipherResponse(status=ResultStatus.NO_RESULT, result=NO_RESULT_MARKER)
            
            return DecipherResponse(
                status=ResultStatus.DECIPHERED,
                result=outcome.result,
                records=outcome.records,
                resolved=outcome.resolved,
            )
        except Exception as e:
            # Log unexpected errors but return ERROR result instead of 500
            logger.error(f"Unexpected error in decipher endpoint: {e}", exc_info=True)
            return DecipherResponse(
                status=ResultStatus.ERROR,
                result=None,
                error_message=str(e),
            )
    
    return app


app = create_app()
