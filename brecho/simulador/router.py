# brecho/simulador/router.py

from fastapi import APIRouter, HTTPException

from brecho.config.logging_config import log

from .impostos import simular_impostos
from .rescisao import simular_rescisao
from .schemas import ImpostosInput, RescisaoInput

router = APIRouter(prefix="/simulador", tags=["Simuladores"])


@router.post("/impostos")
def simular_impostos_endpoint(request: ImpostosInput):
    try:
        return simular_impostos(request).as_dict()
    except Exception as e:
        log.exception(f"Erro ao simular impostos: {e}")
        raise HTTPException(status_code=500, detail="Erro ao simular impostos")


@router.post("/rescisao")
def simular_rescisao_endpoint(request: RescisaoInput):
    try:
        return simular_rescisao(request).as_dict()
    except Exception as e:
        log.exception(f"Erro ao simular rescisão: {e}")
        raise HTTPException(status_code=500, detail="Erro ao simular rescisão")
