# brecho/folha/schemas.py
# Moldes de entrada das calculadoras da folha. O pydantic rejeita qualquer
# campo fora da faixa antes de qualquer cálculo começar.

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Parcela(str, Enum):
    PRIMEIRA = "primeira"
    SEGUNDA = "segunda"


class FolhaInput(BaseModel):
    salario_bruto: float = Field(gt=0)
    dependentes: int = Field(0, ge=0)
    horas_extras: float = Field(0, ge=0)
    percentual_hora_extra: float = Field(50, ge=50, le=100)
    adicional_noturno: float = Field(0, ge=0)  # horas noturnas no mês
    vale_transporte_perc: float = Field(0, ge=0, le=6)
    vale_refeicao: float = Field(0, ge=0)
    outros_descontos: float = Field(0, ge=0)
    outros_proventos: float = Field(0, ge=0)


class DecimoTerceiroInput(BaseModel):
    salario_bruto: float = Field(gt=0)
    meses_trabalhados: int = Field(ge=1, le=12)
    parcela: Parcela
    dependentes: int = Field(0, ge=0)


class FeriasInput(BaseModel):
    salario_bruto: float = Field(gt=0)
    dias_ferias: int = Field(30, ge=10, le=30)
    abono_pecuniario: bool = False
    dependentes: int = Field(0, ge=0)


class FuncionarioFolha(FolhaInput):
    """Linha do cadastro de funcionários usada na folha em lote."""

    nome: str
    matricula: Optional[str] = None
    cargo: Optional[str] = None
    status: str = "ativo"


class FolhaLoteRequest(BaseModel):
    funcionarios: List[dict]
