# brecho/folha/tabelas.py

"""
Tabelas progressivas da folha (vigência 2025).

Cada tabela é uma lista ordenada de faixas (teto crescente). O INSS soma a
alíquota de cada fatia de salário; o IRRF escolhe uma única faixa e aplica a
parcela a deduzir. Os dois algoritmos ficam em `calculations.py`.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List

INFINITO = Decimal("Infinity")


@dataclass(frozen=True)
class FaixaINSS:
    """Faixa da tabela progressiva do INSS (empregado)."""

    teto: Decimal
    aliquota: Decimal


@dataclass(frozen=True)
class FaixaIRRF:
    """Faixa da tabela mensal do IRRF."""

    teto: Decimal
    aliquota: Decimal
    deducao: Decimal
    rotulo: str


# --- INSS 2025 (Progressivo) ---
FAIXAS_INSS: List[FaixaINSS] = [
    FaixaINSS(teto=Decimal("1518.00"), aliquota=Decimal("0.075")),  # até 1.518,00
    FaixaINSS(teto=Decimal("2793.88"), aliquota=Decimal("0.09")),  # 1.518,01 a 2.793,88
    FaixaINSS(teto=Decimal("4190.83"), aliquota=Decimal("0.12")),  # 2.793,89 a 4.190,83
    FaixaINSS(teto=Decimal("8157.41"), aliquota=Decimal("0.14")),  # 4.190,84 a 8.157,41
]
# Desconto máximo do empregado, aplicado como limite final
TETO_INSS = Decimal("951.63")

# --- IRRF 2025 ---
FAIXAS_IRRF: List[FaixaIRRF] = [
    FaixaIRRF(Decimal("2259.20"), Decimal("0"), Decimal("0"), "Isento"),
    FaixaIRRF(Decimal("2826.65"), Decimal("0.075"), Decimal("169.44"), "7,5%"),
    FaixaIRRF(Decimal("3751.05"), Decimal("0.15"), Decimal("381.44"), "15%"),
    FaixaIRRF(Decimal("4664.68"), Decimal("0.225"), Decimal("662.77"), "22,5%"),
    # Acima de 4.664,68 é a última faixa
    FaixaIRRF(INFINITO, Decimal("0.275"), Decimal("896.00"), "27,5%"),
]
DEDUCAO_DEPENDENTE = Decimal("189.59")

# --- Parâmetros da folha (CLT) ---
HORAS_MENSAIS = Decimal("220")
ADICIONAL_NOTURNO = Decimal("0.20")
DIAS_MES_COMERCIAL = Decimal("30")

# --- Encargos do empregador (informativos) ---
ALIQUOTA_FGTS = Decimal("0.08")
ALIQUOTA_INSS_PATRONAL = Decimal("0.28")
