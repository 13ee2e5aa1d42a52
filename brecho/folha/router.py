# brecho/folha/router.py

import numpy as np
from fastapi import APIRouter, HTTPException

from brecho.config.logging_config import log

from .decimo_terceiro import calcular_decimo_terceiro
from .ferias import calcular_ferias
from .folha_mensal import calcular_folha
from .lote import build_summary, processar_folha_lote
from .schemas import DecimoTerceiroInput, FeriasInput, FolhaInput, FolhaLoteRequest

router = APIRouter(prefix="/folha", tags=["Folha de Pagamento"])


@router.post("/calcular")
def calcular_folha_endpoint(request: FolhaInput):
    try:
        return calcular_folha(request).as_dict()
    except Exception as e:
        log.exception(f"Erro ao calcular folha: {e}")
        raise HTTPException(
            status_code=500, detail="Erro ao calcular folha de pagamento"
        )


@router.post("/13-salario")
def calcular_decimo_terceiro_endpoint(request: DecimoTerceiroInput):
    try:
        return calcular_decimo_terceiro(request).as_dict()
    except Exception as e:
        log.exception(f"Erro ao calcular 13º: {e}")
        raise HTTPException(status_code=500, detail="Erro ao calcular 13º salário")


@router.post("/ferias")
def calcular_ferias_endpoint(request: FeriasInput):
    try:
        return calcular_ferias(request).as_dict()
    except Exception as e:
        log.exception(f"Erro ao calcular férias: {e}")
        raise HTTPException(status_code=500, detail="Erro ao calcular férias")


@router.post("/lote")
def calcular_folha_lote_endpoint(request: FolhaLoteRequest):
    """
    1. Monta o DataFrame com o cadastro recebido.
    2. Calcula a folha de cada funcionário ativo.
    3. Devolve o resumo (totais e encargos) e as linhas calculadas.
    """
    try:
        df_resultado = processar_folha_lote(request.funcionarios)
    except Exception as e:
        log.exception(f"Erro na folha em lote: {e}")
        raise HTTPException(status_code=500, detail="Erro ao calcular folha em lote")

    resumo = build_summary(df_resultado)
    df_resultado = df_resultado.replace({np.nan: None})
    return {
        "resumo": resumo,
        "funcionarios": df_resultado.to_dict(orient="records"),
    }
