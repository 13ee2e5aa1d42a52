# brecho/simulador/tabelas_regimes.py

"""
Catálogo dos regimes tributários comparados pelo simulador:
MEI (DAS fixo), Simples Nacional (anexos por atividade) e Lucro Presumido.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, List


class TipoAtividade(str, Enum):
    COMERCIO = "comercio"
    SERVICOS = "servicos"
    INDUSTRIA = "industria"


@dataclass(frozen=True)
class FaixaSimples:
    """Faixa de receita bruta anual (RBT12) de um anexo do Simples."""

    limite: Decimal
    aliquota: Decimal  # nominal, em %
    deducao: Decimal  # parcela a deduzir, em R$/ano


@dataclass(frozen=True)
class ConfigLucroPresumido:
    """Percentuais do Lucro Presumido (todos em %)."""

    presuncao: Decimal
    irpj: Decimal
    csll: Decimal
    pis: Decimal
    cofins: Decimal


# --- MEI (limite 2025: R$ 81.000/ano) ---
MEI_LIMITE_ANUAL = Decimal("81000")
MEI_DAS: Dict[TipoAtividade, Decimal] = {
    TipoAtividade.COMERCIO: Decimal("71.60"),  # ICMS
    TipoAtividade.INDUSTRIA: Decimal("71.60"),  # ICMS
    TipoAtividade.SERVICOS: Decimal("75.60"),  # ISS
}


def _faixas(*linhas) -> List[FaixaSimples]:
    return [
        FaixaSimples(Decimal(limite), Decimal(aliquota), Decimal(deducao))
        for limite, aliquota, deducao in linhas
    ]


# --- Simples Nacional ---
SIMPLES_ANEXO_I = _faixas(  # Comércio
    ("180000", "4", "0"),
    ("360000", "7.3", "5940"),
    ("720000", "9.5", "13860"),
    ("1800000", "10.7", "22500"),
    ("3600000", "14.3", "87300"),
    ("4800000", "19", "378000"),
)
SIMPLES_ANEXO_II = _faixas(  # Indústria
    ("180000", "4.5", "0"),
    ("360000", "7.8", "5940"),
    ("720000", "10", "13860"),
    ("1800000", "11.2", "22500"),
    ("3600000", "14.7", "85500"),
    ("4800000", "30", "720000"),
)
SIMPLES_ANEXO_III = _faixas(  # Serviços
    ("180000", "6", "0"),
    ("360000", "11.2", "9360"),
    ("720000", "13.5", "17640"),
    ("1800000", "16", "35640"),
    ("3600000", "21", "125640"),
    ("4800000", "33", "648000"),
)

SIMPLES_POR_ATIVIDADE: Dict[TipoAtividade, List[FaixaSimples]] = {
    TipoAtividade.COMERCIO: SIMPLES_ANEXO_I,
    TipoAtividade.INDUSTRIA: SIMPLES_ANEXO_II,
    TipoAtividade.SERVICOS: SIMPLES_ANEXO_III,
}
ANEXO_POR_ATIVIDADE: Dict[TipoAtividade, str] = {
    TipoAtividade.COMERCIO: "I",
    TipoAtividade.INDUSTRIA: "II",
    TipoAtividade.SERVICOS: "III",
}

# --- Lucro Presumido ---
LP_COMERCIO = ConfigLucroPresumido(
    presuncao=Decimal("8"),
    irpj=Decimal("15"),
    csll=Decimal("9"),
    pis=Decimal("0.65"),
    cofins=Decimal("3"),
)
LP_SERVICOS = ConfigLucroPresumido(
    presuncao=Decimal("32"),
    irpj=Decimal("15"),
    csll=Decimal("9"),
    pis=Decimal("0.65"),
    cofins=Decimal("3"),
)
LP_POR_ATIVIDADE: Dict[TipoAtividade, ConfigLucroPresumido] = {
    TipoAtividade.COMERCIO: LP_COMERCIO,
    TipoAtividade.INDUSTRIA: LP_COMERCIO,
    TipoAtividade.SERVICOS: LP_SERVICOS,
}
# Adicional de IRPJ: 10% sobre o lucro presumido que exceder R$ 20.000/mês
LP_LIMITE_ADICIONAL_IRPJ = Decimal("20000")
LP_ALIQUOTA_ADICIONAL_IRPJ = Decimal("10")

REGIME_MEI = "MEI"
REGIME_SIMPLES = "Simples Nacional"
REGIME_LUCRO_PRESUMIDO = "Lucro Presumido"
