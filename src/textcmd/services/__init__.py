"""Service layer — command gating and dispatch returning ServiceResult.

Services may import from domain. They reach the editor only through the
collaborator protocols in :mod:`textcmd.services.host` and must never
import from commands, output, or infrastructure.
"""
