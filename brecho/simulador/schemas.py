# brecho/simulador/schemas.py

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from .tabelas_regimes import TipoAtividade


class TipoRescisao(str, Enum):
    SEM_JUSTA_CAUSA = "sem_justa_causa"
    COM_JUSTA_CAUSA = "com_justa_causa"
    PEDIDO_DEMISSAO = "pedido_demissao"
    ACORDO = "acordo"


class ImpostosInput(BaseModel):
    faturamento_mensal: float = Field(gt=0)
    tipo_atividade: TipoAtividade = TipoAtividade.COMERCIO


class RescisaoInput(BaseModel):
    salario_bruto: float = Field(gt=0)
    data_admissao: date
    # Demissão antes da admissão não é rejeitada (ver simular_rescisao)
    data_demissao: date
    tipo_rescisao: TipoRescisao
    saldo_fgts: float = Field(0, ge=0)
    aviso_previo_trabalhado: bool = False
    ferias_vencidas: bool = False
    meses_ferias_proporcionais: int = Field(0, ge=0, le=12)
