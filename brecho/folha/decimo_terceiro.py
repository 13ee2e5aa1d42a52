# brecho/folha/decimo_terceiro.py

"""
13º salário em duas parcelas.

A 1ª parcela é um adiantamento de 50% sem descontos. Na 2ª parcela o INSS e o
IRRF incidem sobre o 13º INTEIRO (valor proporcional) e são retidos de uma vez,
descontados só do valor restante.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from brecho.shared.utils import ZERO, arredondar, para_float, safe_decimal

from . import calculations
from .schemas import DecimoTerceiroInput, Parcela


@dataclass(frozen=True)
class ResultadoDecimoTerceiro:
    parcela: Parcela
    salario_bruto: Decimal
    meses_trabalhados: int
    valor_proporcional: Decimal
    primeira_parcela: Decimal
    segunda_parcela_bruta: Decimal
    inss: Decimal
    irrf: Decimal
    valor_liquido: Decimal
    base_irrf: Optional[Decimal] = None

    @property
    def total_descontos(self) -> Decimal:
        return self.inss + self.irrf

    def as_dict(self) -> dict:
        if self.parcela == Parcela.PRIMEIRA:
            return {
                "tipo": "primeira_parcela",
                "salario_bruto": para_float(self.salario_bruto),
                "meses_trabalhados": self.meses_trabalhados,
                "valor_proporcional": para_float(self.valor_proporcional),
                "valor_primeira_parcela": para_float(self.primeira_parcela),
                "inss": 0,
                "irrf": 0,
                "valor_liquido": para_float(self.valor_liquido),
            }
        return {
            "tipo": "segunda_parcela",
            "salario_bruto": para_float(self.salario_bruto),
            "meses_trabalhados": self.meses_trabalhados,
            "valor_proporcional": para_float(self.valor_proporcional),
            "primeira_parcela_paga": para_float(self.primeira_parcela),
            "valor_bruto_segunda": para_float(self.segunda_parcela_bruta),
            "inss": para_float(self.inss),
            "irrf": para_float(self.irrf),
            "total_descontos": para_float(self.total_descontos),
            "valor_liquido": para_float(self.valor_liquido),
        }


def valor_proporcional(salario_bruto, meses: int) -> Decimal:
    """Avos do 13º: (salário / 12) * meses trabalhados."""
    return arredondar(safe_decimal(salario_bruto) / 12 * meses)


def calcular_decimo_terceiro(dados: DecimoTerceiroInput) -> ResultadoDecimoTerceiro:
    proporcional = valor_proporcional(dados.salario_bruto, dados.meses_trabalhados)
    primeira = arredondar(proporcional / 2)
    segunda_bruta = proporcional - primeira

    if dados.parcela == Parcela.PRIMEIRA:
        # Primeira parcela: 50% sem descontos
        return ResultadoDecimoTerceiro(
            parcela=dados.parcela,
            salario_bruto=arredondar(dados.salario_bruto),
            meses_trabalhados=dados.meses_trabalhados,
            valor_proporcional=proporcional,
            primeira_parcela=primeira,
            segunda_parcela_bruta=segunda_bruta,
            inss=ZERO,
            irrf=ZERO,
            valor_liquido=primeira,
        )

    inss = calculations.calc_inss(proporcional).valor
    base_irrf = calculations.base_irrf(proporcional, inss, dados.dependentes)
    irrf = calculations.calc_irrf(base_irrf).valor

    return ResultadoDecimoTerceiro(
        parcela=dados.parcela,
        salario_bruto=arredondar(dados.salario_bruto),
        meses_trabalhados=dados.meses_trabalhados,
        valor_proporcional=proporcional,
        primeira_parcela=primeira,
        segunda_parcela_bruta=segunda_bruta,
        inss=inss,
        irrf=irrf,
        valor_liquido=segunda_bruta - inss - irrf,
        base_irrf=base_irrf,
    )
