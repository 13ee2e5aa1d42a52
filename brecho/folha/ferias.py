# brecho/folha/ferias.py

from dataclasses import dataclass
from decimal import Decimal

from brecho.shared.utils import ZERO, arredondar, para_float, safe_decimal

from . import calculations
from .schemas import FeriasInput
from .tabelas import DIAS_MES_COMERCIAL


@dataclass(frozen=True)
class ResultadoFerias:
    salario_bruto: Decimal
    dias_ferias: int
    valor_ferias: Decimal
    terco_constitucional: Decimal
    abono_vendido: bool
    dias_abono: int
    abono_pecuniario: Decimal
    terco_abono: Decimal
    inss: Decimal
    irrf: Decimal

    @property
    def total_bruto(self) -> Decimal:
        return (
            self.valor_ferias
            + self.terco_constitucional
            + self.abono_pecuniario
            + self.terco_abono
        )

    @property
    def total_descontos(self) -> Decimal:
        return self.inss + self.irrf

    @property
    def valor_liquido(self) -> Decimal:
        return self.total_bruto - self.total_descontos

    def as_dict(self) -> dict:
        return {
            "salario_bruto": para_float(self.salario_bruto),
            "dias_ferias": self.dias_ferias,
            "valor_ferias": para_float(self.valor_ferias),
            "terco_constitucional": para_float(self.terco_constitucional),
            "abono_pecuniario": {
                "vendido": self.abono_vendido,
                "dias": self.dias_abono,
                "valor": para_float(self.abono_pecuniario),
                "terco": para_float(self.terco_abono),
            },
            "total_bruto": para_float(self.total_bruto),
            "inss": para_float(self.inss),
            "irrf": para_float(self.irrf),
            "total_descontos": para_float(self.total_descontos),
            "valor_liquido": para_float(self.valor_liquido),
        }


def dias_vendaveis(dias_ferias: int) -> int:
    """Até 1/3 do período pode ser convertido em abono pecuniário."""
    return dias_ferias // 3


def calcular_ferias(dados: FeriasInput) -> ResultadoFerias:
    salario_dia = safe_decimal(dados.salario_bruto) / DIAS_MES_COMERCIAL
    valor_ferias = arredondar(salario_dia * dados.dias_ferias)
    terco = arredondar(valor_ferias / 3)

    dias_abono = 0
    abono = ZERO
    terco_abono = ZERO
    if dados.abono_pecuniario:
        dias_abono = dias_vendaveis(dados.dias_ferias)
        abono = arredondar(salario_dia * dias_abono)
        terco_abono = arredondar(abono / 3)

    # Abono pecuniário e seu terço são isentos: fora da base do INSS/IRRF
    base_inss = valor_ferias + terco
    inss = calculations.calc_inss(base_inss).valor
    base_irrf = calculations.base_irrf(base_inss, inss, dados.dependentes)
    irrf = calculations.calc_irrf(base_irrf).valor

    return ResultadoFerias(
        salario_bruto=arredondar(dados.salario_bruto),
        dias_ferias=dados.dias_ferias,
        valor_ferias=valor_ferias,
        terco_constitucional=terco,
        abono_vendido=dados.abono_pecuniario,
        dias_abono=dias_abono,
        abono_pecuniario=abono,
        terco_abono=terco_abono,
        inss=inss,
        irrf=irrf,
    )
