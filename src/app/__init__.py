"""App: núcleo do envio outbound.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: fachada de envio (sem IO direto)
- services/: classificação de respostas e normalização de erros
- domain/: tipos de mensagem, componentes, resultados e erros
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs
- constants/: constantes da aplicação

Padrão: app executa; api adapta.
"""
