# brecho/folha/folha_mensal.py

"""
Folha mensal: proventos (salário, horas extras, adicional noturno, outros),
descontos (INSS, IRRF, VT, VR, outros), líquido e encargos do empregador.

Todo valor monetário é arredondado para centavos antes de entrar na etapa
seguinte, então os totais reportados batem com a soma das parcelas reportadas.
"""

from dataclasses import dataclass
from decimal import Decimal

from brecho.config.logging_config import log
from brecho.shared.utils import arredondar, para_float, safe_decimal

from . import calculations
from .schemas import FolhaInput
from .tabelas import ADICIONAL_NOTURNO, HORAS_MENSAIS


@dataclass(frozen=True)
class ResultadoFolha:
    entrada: FolhaInput

    # Proventos
    salario_bruto: Decimal
    valor_horas_extras: Decimal
    valor_adicional_noturno: Decimal
    outros_proventos: Decimal
    total_proventos: Decimal

    # Descontos
    inss: calculations.ResultadoINSS
    irrf: calculations.ResultadoIRRF
    base_irrf: Decimal
    vale_transporte: Decimal
    vale_refeicao: Decimal
    outros_descontos: Decimal
    total_descontos: Decimal

    # Líquido (sem piso: pode ficar negativo)
    salario_liquido: Decimal

    # Encargos do empregador (não descontam do líquido)
    fgts: Decimal
    inss_patronal: Decimal

    @property
    def total_encargos(self) -> Decimal:
        return self.fgts + self.inss_patronal

    def as_dict(self) -> dict:
        return {
            "salario_bruto": para_float(self.salario_bruto),
            "horas_extras": {
                "quantidade": self.entrada.horas_extras,
                "percentual": self.entrada.percentual_hora_extra,
                "valor": para_float(self.valor_horas_extras),
            },
            "adicional_noturno": {
                "horas": self.entrada.adicional_noturno,
                "valor": para_float(self.valor_adicional_noturno),
            },
            "outros_proventos": para_float(self.outros_proventos),
            "total_proventos": para_float(self.total_proventos),
            "inss": {
                "valor": para_float(self.inss.valor),
                "aliquota_efetiva": para_float(self.inss.aliquota_efetiva),
            },
            "irrf": {
                "valor": para_float(self.irrf.valor),
                "aliquota": float(self.irrf.aliquota),
                "faixa": self.irrf.faixa,
                "base_calculo": para_float(self.base_irrf),
            },
            "vale_transporte": {
                "percentual": self.entrada.vale_transporte_perc,
                "valor": para_float(self.vale_transporte),
            },
            "vale_refeicao": para_float(self.vale_refeicao),
            "outros_descontos": para_float(self.outros_descontos),
            "total_descontos": para_float(self.total_descontos),
            "salario_liquido": para_float(self.salario_liquido),
            "encargos": {
                "fgts": para_float(self.fgts),
                "inss_patronal": para_float(self.inss_patronal),
                "total": para_float(self.total_encargos),
            },
        }


def calcular_folha(dados: FolhaInput) -> ResultadoFolha:
    salario = arredondar(dados.salario_bruto)

    # 1. Valor da hora (220h mensais - CLT)
    valor_hora = safe_decimal(dados.salario_bruto) / HORAS_MENSAIS

    # 2. Horas extras
    percentual_he = safe_decimal(dados.percentual_hora_extra)
    valor_he = arredondar(
        safe_decimal(dados.horas_extras) * valor_hora * (1 + percentual_he / 100)
    )

    # 3. Adicional noturno (20% fixo)
    valor_noturno = arredondar(
        safe_decimal(dados.adicional_noturno) * valor_hora * ADICIONAL_NOTURNO
    )

    # 4. Total de proventos
    outros_proventos = arredondar(dados.outros_proventos)
    total_proventos = salario + valor_he + valor_noturno + outros_proventos

    # 5. INSS sobre o total de proventos
    inss = calculations.calc_inss(total_proventos)

    # 6. IRRF sobre (proventos - INSS - dependentes)
    base_irrf = calculations.base_irrf(total_proventos, inss.valor, dados.dependentes)
    irrf = calculations.calc_irrf(base_irrf)

    # 7. Vale-transporte sobre o salário base
    vale_transporte = arredondar(
        salario * safe_decimal(dados.vale_transporte_perc) / 100
    )
    vale_refeicao = arredondar(dados.vale_refeicao)
    outros_descontos = arredondar(dados.outros_descontos)

    # 8. Total de descontos
    total_descontos = (
        inss.valor + irrf.valor + vale_transporte + vale_refeicao + outros_descontos
    )

    # 9. Líquido
    salario_liquido = total_proventos - total_descontos
    if salario_liquido < 0:
        log.warning(
            f"Descontos (R$ {total_descontos}) superam os proventos (R$ {total_proventos}): líquido negativo."
        )

    # 10. Encargos do empregador
    fgts = calculations.calc_fgts(total_proventos)
    inss_patronal = calculations.calc_inss_patronal(total_proventos)

    return ResultadoFolha(
        entrada=dados,
        salario_bruto=salario,
        valor_horas_extras=valor_he,
        valor_adicional_noturno=valor_noturno,
        outros_proventos=outros_proventos,
        total_proventos=total_proventos,
        inss=inss,
        irrf=irrf,
        base_irrf=base_irrf,
        vale_transporte=vale_transporte,
        vale_refeicao=vale_refeicao,
        outros_descontos=outros_descontos,
        total_descontos=total_descontos,
        salario_liquido=salario_liquido,
        fgts=fgts,
        inss_patronal=inss_patronal,
    )
