"""App: orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo inbound (webhook -> use case)
- use_cases/: casos de uso (envio outbound, evento inbound)
- services/: auto-responder e respostas fixas
- protocols/: contratos e modelos canônicos
- observability/: correlation_id para logs
- constants/: constantes da aplicação

Padrão: app executa; api adapta; config configura.
"""
