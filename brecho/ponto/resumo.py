# brecho/ponto/resumo.py

"""
Resumo do ponto para integração com a folha: soma os minutos entre cada
entrada e a saída seguinte do mesmo dia e compara com a jornada contratada.
O resultado em horas decimais alimenta `horas_extras` da calculadora da folha.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, Field, field_validator

from brecho.config.logging_config import log


class TipoRegistro(str, Enum):
    ENTRADA = "entrada"
    SAIDA = "saida"


class RegistroPonto(BaseModel):
    data: date
    hora: str
    tipo: TipoRegistro

    @field_validator("hora")
    @classmethod
    def validar_hora(cls, v: str) -> str:
        partes = v.strip().split(":")
        if len(partes) not in (2, 3) or not all(p.isdigit() for p in partes):
            raise ValueError("hora deve estar no formato HH:MM ou HH:MM:SS")
        horas, minutos = int(partes[0]), int(partes[1])
        segundos = int(partes[2]) if len(partes) == 3 else 0
        if horas > 23 or minutos > 59 or segundos > 59:
            raise ValueError("hora fora do intervalo 00:00:00-23:59:59")
        return v.strip()

    @property
    def minutos_do_dia(self) -> int:
        horas, minutos = self.hora.split(":")[:2]
        return int(horas) * 60 + int(minutos)


class PontoResumoInput(BaseModel):
    registros: List[RegistroPonto] = []
    carga_horaria_diaria: int = Field(8, ge=1, le=12)


def resumir_ponto(dados: PontoResumoInput) -> dict:
    registros = sorted(dados.registros, key=lambda r: (r.data, r.minutos_do_dia))

    total_minutos = 0
    dias_trabalhados: Set[date] = set()
    ultima_entrada: Optional[RegistroPonto] = None

    for registro in registros:
        if registro.tipo == TipoRegistro.ENTRADA:
            ultima_entrada = registro
        elif ultima_entrada is not None and ultima_entrada.data == registro.data:
            total_minutos += registro.minutos_do_dia - ultima_entrada.minutos_do_dia
            dias_trabalhados.add(registro.data)
            ultima_entrada = None

    minutos_esperados = len(dias_trabalhados) * dados.carga_horaria_diaria * 60
    horas_extras_minutos = max(0, total_minutos - minutos_esperados)

    log.debug(
        f"[Ponto] {len(registros)} registros, {total_minutos} min em {len(dias_trabalhados)} dia(s)"
    )
    return {
        "total_minutos": total_minutos,
        "total_horas": total_minutos // 60,
        "total_minutos_resto": total_minutos % 60,
        "dias_trabalhados": len(dias_trabalhados),
        "horas_extras_minutos": horas_extras_minutos,
        "horas_extras": horas_extras_minutos // 60,
        "horas_extras_decimal": round(horas_extras_minutos / 60, 2),
        "registros": len(registros),
    }
