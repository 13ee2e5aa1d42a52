# brecho/folha/calculations.py

"""
As "ferramentas" de imposto usadas por todas as calculadoras:
INSS progressivo por fatias, IRRF por faixa única e os encargos do empregador.
"""

from dataclasses import dataclass
from decimal import Decimal

from brecho.config.logging_config import log
from brecho.shared.utils import ZERO, arredondar, safe_decimal

from .tabelas import (
    ALIQUOTA_FGTS,
    ALIQUOTA_INSS_PATRONAL,
    DEDUCAO_DEPENDENTE,
    FAIXAS_INSS,
    FAIXAS_IRRF,
    TETO_INSS,
)


@dataclass(frozen=True)
class ResultadoINSS:
    valor: Decimal
    aliquota_efetiva: Decimal


@dataclass(frozen=True)
class ResultadoIRRF:
    valor: Decimal
    aliquota: Decimal
    faixa: str


def calc_inss(salario_bruto) -> ResultadoINSS:
    """
    INSS progressivo: cada faixa tributa só a fatia do salário que cai nela.
    O total nunca passa do TETO_INSS.
    """
    base = safe_decimal(salario_bruto)

    inss = ZERO
    base_anterior = ZERO
    for faixa in FAIXAS_INSS:
        if base > base_anterior:
            fatia = min(base, faixa.teto) - base_anterior
            inss += fatia * faixa.aliquota
            base_anterior = faixa.teto

    inss = min(inss, TETO_INSS)
    aliquota_efetiva = inss / base * 100 if base > 0 else ZERO

    resultado = ResultadoINSS(
        valor=arredondar(inss), aliquota_efetiva=arredondar(aliquota_efetiva)
    )
    log.debug(f"[Cálculo] INSS: Base R$ {base}, Calculado R$ {resultado.valor}")
    return resultado


def calc_irrf(base_calculo) -> ResultadoIRRF:
    """
    IRRF: localiza a primeira faixa cujo teto cobre a base e aplica
    (Base * Alíquota) - Dedução. Nunca negativo.
    """
    base = safe_decimal(base_calculo)

    for faixa in FAIXAS_IRRF:
        if base <= faixa.teto:
            irrf = max(ZERO, base * faixa.aliquota - faixa.deducao)
            resultado = ResultadoIRRF(
                valor=arredondar(irrf),
                aliquota=(faixa.aliquota * 100).normalize(),
                faixa=faixa.rotulo,
            )
            log.debug(
                f"[Cálculo] IRRF: Base R$ {base}, Faixa {faixa.rotulo}, Calculado R$ {resultado.valor}"
            )
            return resultado

    return ResultadoIRRF(valor=ZERO, aliquota=ZERO, faixa="Isento")


def base_irrf(base_bruta, inss_descontado, dependentes: int) -> Decimal:
    """Base do IRRF = Base Bruta - INSS já descontado - Dependentes."""
    deducao_dependentes = dependentes * DEDUCAO_DEPENDENTE
    return safe_decimal(base_bruta) - safe_decimal(inss_descontado) - deducao_dependentes


def calc_fgts(base_de_calculo_fgts) -> Decimal:
    """Depósito de FGTS (8%), encargo do empregador."""
    return arredondar(safe_decimal(base_de_calculo_fgts) * ALIQUOTA_FGTS)


def calc_inss_patronal(base_de_calculo) -> Decimal:
    """INSS patronal (~28% com RAT/terceiros), encargo do empregador."""
    return arredondar(safe_decimal(base_de_calculo) * ALIQUOTA_INSS_PATRONAL)
