# brecho/ponto/router.py

from fastapi import APIRouter, HTTPException

from brecho.config.logging_config import log

from .resumo import PontoResumoInput, resumir_ponto

router = APIRouter(prefix="/ponto", tags=["Ponto"])


@router.post("/resumo")
def resumo_ponto_endpoint(request: PontoResumoInput):
    try:
        return resumir_ponto(request)
    except Exception as e:
        log.exception(f"Erro ao gerar resumo do ponto: {e}")
        raise HTTPException(status_code=500, detail="Erro ao gerar resumo do ponto")
