"""Coordenadores do canal WhatsApp."""
