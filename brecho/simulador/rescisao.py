# brecho/simulador/rescisao.py

"""
Simulador de rescisão contratual.

As verbas dependem do tipo de rescisão:

| verba                     | sem justa causa | acordo    | pedido demissão      | justa causa |
|---------------------------|-----------------|-----------|----------------------|-------------|
| saldo de salário          | sim             | sim       | sim                  | sim         |
| aviso prévio indenizado   | 100%            | 50%       | desconto (1 salário) | não         |
| férias vencidas + 1/3     | sim             | sim       | sim                  | não         |
| férias proporcionais + 1/3| sim             | sim       | sim                  | não         |
| 13º proporcional          | sim             | sim       | sim                  | não         |
| multa FGTS / saque        | 40% / 100%      | 20% / 80% | não                  | não         |
"""

import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict

from brecho.config.logging_config import log
from brecho.shared.utils import ZERO, arredondar, para_float, safe_decimal

from .schemas import RescisaoInput, TipoRescisao

DIAS_ANO = 365
DIAS_MES = 30

AVISO_PREVIO_DIAS_BASE = 30
AVISO_PREVIO_DIAS_POR_ANO = 3
AVISO_PREVIO_DIAS_MAXIMO = 90

MULTA_FGTS = {
    TipoRescisao.SEM_JUSTA_CAUSA: Decimal("0.40"),
    TipoRescisao.ACORDO: Decimal("0.20"),
}
# Parte do saldo liberada para saque
SAQUE_FGTS = {
    TipoRescisao.SEM_JUSTA_CAUSA: Decimal("1"),
    TipoRescisao.ACORDO: Decimal("0.80"),
}

# Tempo mínimo (em anos) para o seguro-desemprego
CARENCIA_SEGURO_ANOS = Decimal("0.5")


@dataclass(frozen=True)
class TempoServico:
    dias: int

    @property
    def anos_fracionados(self) -> Decimal:
        return Decimal(self.dias) / DIAS_ANO

    @property
    def anos(self) -> int:
        return self.dias // DIAS_ANO

    @property
    def meses(self) -> int:
        # Resto com o sinal dos dias: -14 dias -> -1 mês
        return int(math.fmod(self.dias, DIAS_ANO)) // DIAS_MES


def calcular_tempo_servico(data_admissao: date, data_demissao: date) -> TempoServico:
    return TempoServico(dias=(data_demissao - data_admissao).days)


def dias_aviso_previo(anos_completos: int) -> int:
    """Aviso proporcional: 30 dias + 3 por ano completo, no máximo 90."""
    return min(
        AVISO_PREVIO_DIAS_MAXIMO,
        AVISO_PREVIO_DIAS_BASE + anos_completos * AVISO_PREVIO_DIAS_POR_ANO,
    )


@dataclass(frozen=True)
class ResultadoRescisao:
    dados: RescisaoInput
    tempo_servico: TempoServico
    verbas: Dict[str, Decimal] = field(default_factory=dict)
    total_proventos: Decimal = ZERO
    total_descontos: Decimal = ZERO
    multa_fgts: Decimal = ZERO
    saque_fgts: Decimal = ZERO
    direito_seguro_desemprego: bool = False

    @property
    def total_rescisao(self) -> Decimal:
        # Sem piso: pode ficar negativo quando o desconto do aviso supera as verbas
        return self.total_proventos - self.total_descontos

    @property
    def total_a_receber(self) -> Decimal:
        return self.total_rescisao + self.saque_fgts

    def as_dict(self) -> dict:
        return {
            "dados_contrato": {
                "salario_bruto": para_float(self.dados.salario_bruto),
                "data_admissao": self.dados.data_admissao.isoformat(),
                "data_demissao": self.dados.data_demissao.isoformat(),
                "tempo_servico": {
                    "anos": self.tempo_servico.anos,
                    "meses": self.tempo_servico.meses,
                    "dias": self.tempo_servico.dias,
                },
            },
            "tipo_rescisao": self.dados.tipo_rescisao.value,
            "verbas_rescisorias": {k: para_float(v) for k, v in self.verbas.items()},
            "resumo": {
                "total_proventos": para_float(self.total_proventos),
                "total_descontos": para_float(self.total_descontos),
                "total_rescisao": para_float(self.total_rescisao),
                "fgts": {
                    "saldo": para_float(self.dados.saldo_fgts),
                    "multa": para_float(self.multa_fgts),
                    "saque_total": para_float(self.saque_fgts),
                },
                "direito_seguro_desemprego": self.direito_seguro_desemprego,
                "total_a_receber": para_float(self.total_a_receber),
            },
        }


def simular_rescisao(dados: RescisaoInput) -> ResultadoRescisao:
    tipo = dados.tipo_rescisao
    salario = arredondar(dados.salario_bruto)
    salario_dia = safe_decimal(dados.salario_bruto) / DIAS_MES
    um_doze_avos = safe_decimal(dados.salario_bruto) / 12

    if dados.data_demissao < dados.data_admissao:
        log.warning(
            f"Data de demissão ({dados.data_demissao}) anterior à admissão ({dados.data_admissao}): tempo de serviço negativo."
        )

    tempo = calcular_tempo_servico(dados.data_admissao, dados.data_demissao)
    justa_causa = tipo == TipoRescisao.COM_JUSTA_CAUSA

    verbas: Dict[str, Decimal] = {}
    proventos = ZERO
    descontos = ZERO

    # 1. Saldo de salário (dias trabalhados no mês da demissão)
    verbas["saldo_salario"] = arredondar(salario_dia * dados.data_demissao.day)
    proventos += verbas["saldo_salario"]

    # 2. Aviso prévio
    if tipo in (TipoRescisao.SEM_JUSTA_CAUSA, TipoRescisao.ACORDO):
        dias_aviso = dias_aviso_previo(tempo.anos)
        if dados.aviso_previo_trabalhado:
            # Já foi pago como salário
            verbas["aviso_previo_trabalhado"] = ZERO
        else:
            aviso = dias_aviso * salario_dia
            if tipo == TipoRescisao.ACORDO:
                aviso = aviso * Decimal("0.5")
            verbas["aviso_previo_indenizado"] = arredondar(aviso)
            proventos += verbas["aviso_previo_indenizado"]
    elif tipo == TipoRescisao.PEDIDO_DEMISSAO and not dados.aviso_previo_trabalhado:
        # Aviso não cumprido pelo empregado é descontado
        verbas["desconto_aviso_previo"] = salario
        descontos += verbas["desconto_aviso_previo"]

    # 3. Férias vencidas + 1/3
    if dados.ferias_vencidas and not justa_causa:
        verbas["ferias_vencidas"] = salario
        verbas["terco_ferias_vencidas"] = arredondar(salario / 3)
        proventos += verbas["ferias_vencidas"] + verbas["terco_ferias_vencidas"]

    # 4. Férias proporcionais + 1/3
    if dados.meses_ferias_proporcionais > 0 and not justa_causa:
        ferias_proporcionais = um_doze_avos * dados.meses_ferias_proporcionais
        verbas["ferias_proporcionais"] = arredondar(ferias_proporcionais)
        verbas["terco_ferias_proporcionais"] = arredondar(ferias_proporcionais / 3)
        proventos += (
            verbas["ferias_proporcionais"] + verbas["terco_ferias_proporcionais"]
        )

    # 5. 13º proporcional (meses do ano até a demissão)
    if not justa_causa:
        meses_13 = dados.data_demissao.month
        verbas["decimo_terceiro_proporcional"] = arredondar(um_doze_avos * meses_13)
        proventos += verbas["decimo_terceiro_proporcional"]

    # 6. FGTS
    saldo_fgts = safe_decimal(dados.saldo_fgts)
    multa = MULTA_FGTS.get(tipo, ZERO) * saldo_fgts
    saque = SAQUE_FGTS.get(tipo, ZERO) * saldo_fgts + multa
    verbas["multa_fgts"] = arredondar(multa)
    verbas["saque_fgts"] = arredondar(saque)

    # 7. Seguro-desemprego
    direito_seguro = (
        tipo == TipoRescisao.SEM_JUSTA_CAUSA
        and tempo.anos_fracionados >= CARENCIA_SEGURO_ANOS
    )

    return ResultadoRescisao(
        dados=dados,
        tempo_servico=tempo,
        verbas=verbas,
        total_proventos=proventos,
        total_descontos=descontos,
        multa_fgts=verbas["multa_fgts"],
        saque_fgts=verbas["saque_fgts"],
        direito_seguro_desemprego=direito_seguro,
    )
