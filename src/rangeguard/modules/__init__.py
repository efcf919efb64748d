"""📦 modules/ — Bounded contexts específicos del negocio

✨ Estado actual:
   • validation/ → Aplica BoundedValue a lotes de candidatos (archivo o CLI)

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Reportes, puertos y errores del subdominio
   • application/    → Casos de uso
   • infrastructure/ → Adaptadores concretos y observabilidad
   • presentation/   → CLI
"""
