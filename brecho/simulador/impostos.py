# brecho/simulador/impostos.py

"""
Simulador de regime tributário: compara o imposto mensal estimado no MEI,
no Simples Nacional e no Lucro Presumido e recomenda o mais barato entre os
regimes em que a empresa é elegível.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from brecho.config.logging_config import log
from brecho.shared.utils import ZERO, arredondar, para_float, safe_decimal

from .schemas import ImpostosInput
from .tabelas_regimes import (
    ANEXO_POR_ATIVIDADE,
    LP_ALIQUOTA_ADICIONAL_IRPJ,
    LP_LIMITE_ADICIONAL_IRPJ,
    LP_POR_ATIVIDADE,
    MEI_DAS,
    MEI_LIMITE_ANUAL,
    REGIME_LUCRO_PRESUMIDO,
    REGIME_MEI,
    REGIME_SIMPLES,
    SIMPLES_POR_ATIVIDADE,
    TipoAtividade,
)

MESES_ANO = 12


@dataclass(frozen=True)
class ResultadoMEI:
    elegivel: bool
    limite_mensal: Decimal
    imposto_mensal: Optional[Decimal] = None

    def as_dict(self) -> dict:
        dados = {"elegivel": self.elegivel, "limite_mensal": para_float(self.limite_mensal)}
        if self.imposto_mensal is not None:
            dados["imposto_mensal"] = para_float(self.imposto_mensal)
        return dados


@dataclass(frozen=True)
class ResultadoSimples:
    elegivel: bool
    anexo: str
    aliquota_efetiva: Optional[Decimal] = None
    imposto_mensal: Optional[Decimal] = None

    def as_dict(self) -> dict:
        dados = {"elegivel": self.elegivel, "anexo": self.anexo}
        if self.elegivel:
            dados["aliquota_efetiva"] = para_float(self.aliquota_efetiva)
            dados["imposto_mensal"] = para_float(self.imposto_mensal)
        return dados


@dataclass(frozen=True)
class ResultadoLucroPresumido:
    imposto_mensal: Decimal
    detalhamento: Dict[str, Decimal] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "imposto_mensal": para_float(self.imposto_mensal),
            "detalhamento": {k: para_float(v) for k, v in self.detalhamento.items()},
        }


@dataclass(frozen=True)
class ResultadoSimulacaoImpostos:
    faturamento_mensal: Decimal
    faturamento_anual: Decimal
    tipo_atividade: TipoAtividade
    mei: ResultadoMEI
    simples: ResultadoSimples
    lucro_presumido: ResultadoLucroPresumido
    recomendacao: str

    def as_dict(self) -> dict:
        return {
            "faturamento_mensal": para_float(self.faturamento_mensal),
            "faturamento_anual": para_float(self.faturamento_anual),
            "tipo_atividade": self.tipo_atividade.value,
            "mei": self.mei.as_dict(),
            "simples": self.simples.as_dict(),
            "lucro_presumido": self.lucro_presumido.as_dict(),
            "recomendacao": self.recomendacao,
        }


def simular_mei(faturamento_anual: Decimal, atividade: TipoAtividade) -> ResultadoMEI:
    limite_mensal = MEI_LIMITE_ANUAL / MESES_ANO
    if faturamento_anual > MEI_LIMITE_ANUAL:
        return ResultadoMEI(elegivel=False, limite_mensal=limite_mensal)
    return ResultadoMEI(
        elegivel=True, limite_mensal=limite_mensal, imposto_mensal=MEI_DAS[atividade]
    )


def simular_simples(
    faturamento_mensal: Decimal, faturamento_anual: Decimal, atividade: TipoAtividade
) -> ResultadoSimples:
    anexo = ANEXO_POR_ATIVIDADE[atividade]
    faixa = next(
        (f for f in SIMPLES_POR_ATIVIDADE[atividade] if faturamento_anual <= f.limite),
        None,
    )
    if faixa is None:
        return ResultadoSimples(elegivel=False, anexo=anexo)

    # Alíquota efetiva = (RBT12 x Alíquota nominal - Parcela a deduzir) / RBT12
    aliquota_efetiva = (
        (faturamento_anual * faixa.aliquota / 100 - faixa.deducao)
        / faturamento_anual
        * 100
    )
    imposto_mensal = faturamento_mensal * aliquota_efetiva / 100

    return ResultadoSimples(
        elegivel=True,
        anexo=anexo,
        aliquota_efetiva=arredondar(aliquota_efetiva),
        imposto_mensal=arredondar(imposto_mensal),
    )


def simular_lucro_presumido(
    faturamento_mensal: Decimal, atividade: TipoAtividade
) -> ResultadoLucroPresumido:
    config = LP_POR_ATIVIDADE[atividade]

    base_presumida = arredondar(faturamento_mensal * config.presuncao / 100)
    irpj = arredondar(base_presumida * config.irpj / 100)
    adicional_irpj = arredondar(
        max(ZERO, (base_presumida - LP_LIMITE_ADICIONAL_IRPJ) * LP_ALIQUOTA_ADICIONAL_IRPJ / 100)
    )
    csll = arredondar(base_presumida * config.csll / 100)
    pis = arredondar(faturamento_mensal * config.pis / 100)
    cofins = arredondar(faturamento_mensal * config.cofins / 100)

    return ResultadoLucroPresumido(
        imposto_mensal=irpj + adicional_irpj + csll + pis + cofins,
        detalhamento={
            "base_presumida": base_presumida,
            "irpj": irpj,
            "adicional_irpj": adicional_irpj,
            "csll": csll,
            "pis": pis,
            "cofins": cofins,
        },
    )


def escolher_regime(
    mei: ResultadoMEI, simples: ResultadoSimples, lucro_presumido: ResultadoLucroPresumido
) -> str:
    """Menor imposto mensal entre os regimes elegíveis; empate mantém a ordem da lista."""
    candidatos = []
    if mei.elegivel:
        candidatos.append((REGIME_MEI, mei.imposto_mensal))
    if simples.elegivel:
        candidatos.append((REGIME_SIMPLES, simples.imposto_mensal))
    candidatos.append((REGIME_LUCRO_PRESUMIDO, lucro_presumido.imposto_mensal))

    regime, _ = min(candidatos, key=lambda c: c[1])
    return regime


def simular_impostos(dados: ImpostosInput) -> ResultadoSimulacaoImpostos:
    # Sem arredondar: faturamentos abaixo de meio centavo zerariam o RBT12
    faturamento_mensal = safe_decimal(dados.faturamento_mensal)
    faturamento_anual = faturamento_mensal * MESES_ANO
    atividade = dados.tipo_atividade

    mei = simular_mei(faturamento_anual, atividade)
    simples = simular_simples(faturamento_mensal, faturamento_anual, atividade)
    lucro_presumido = simular_lucro_presumido(faturamento_mensal, atividade)
    recomendacao = escolher_regime(mei, simples, lucro_presumido)

    log.debug(
        f"[Simulador] Faturamento R$ {arredondar(faturamento_mensal)}/mês ({atividade.value}) -> {recomendacao}"
    )
    return ResultadoSimulacaoImpostos(
        faturamento_mensal=faturamento_mensal,
        faturamento_anual=faturamento_anual,
        tipo_atividade=atividade,
        mei=mei,
        simples=simples,
        lucro_presumido=lucro_presumido,
        recomendacao=recomendacao,
    )
