"""API: camada de borda com a WhatsApp Cloud API.

Responsabilidades:
- Receber requests HTTP (webhook, envio)
- Normalizar envelopes de webhook para modelos internos
- Construir payloads para a Graph API
- Validar inputs de envio (telefone, campos, tipo de mídia)

Subpastas:
- connectors/: cliente HTTP e webhook da Graph API
- normalizers/: envelope de webhook -> evento interno
- payload_builders/: intent -> payload JSON
- validators/: validação de inputs de envio
- routes/: endpoints HTTP (webhook, envio, health)
- middleware/: correlation_id por request

NÃO PODE conter: orquestração de use cases.
"""
