from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from .base import Base, new_id, now_utc

DEFAULT_ADMISSION_REQUIREMENTS = [
    'Ser estudiante activo del Liceo de Costa Rica',
    'Mantener promedio académico mínimo de 80',
    'Disponibilidad para entrenamientos regulares',
    'Compromiso con los valores institucionales',
    'Participación en ceremonias patrias',
]


def _default_requirements():
    return list(DEFAULT_ADMISSION_REQUIREMENTS)


class SiteConfig(Base):
    """Single-row table holding the public site settings."""

    __tablename__ = 'site_config'
    id = Column(String(36), primary_key=True, default=new_id)
    site_name = Column(Text, nullable=False, default='Cuerpo de Banderas')
    site_subtitle = Column(Text, nullable=False, default='Liceo de Costa Rica')
    hero_description = Column(
        Text,
        default='Honor, disciplina y patriotismo. Formando jóvenes costarricenses con pasos '
                'chilenos adaptados a nuestra cultura nacional.',
    )
    logo_url = Column(Text)
    logo_s3_key = Column(Text)
    favicon_url = Column(Text)
    favicon_s3_key = Column(Text)
    contact_email = Column(Text, default='cuerpo.banderas@liceocostarica.ed.cr')
    contact_phone = Column(Text, default='+506 2221-9358')
    address = Column(Text, default='Liceo de Costa Rica\nAvenida 6, Calle 7-9\nSan José, Costa Rica')
    training_schedule = Column(Text, default='Martes y Jueves, 2:00 PM - 4:00 PM')
    training_location = Column(Text, default='Patio principal del Liceo')
    ceremonies_schedule = Column(Text, default='Fechas patrias y eventos institucionales')
    ceremonies_notes = Column(Text, default='Se coordinan con anticipación')
    meetings_schedule = Column(Text, default='Viernes, 3:00 PM - 4:00 PM')
    meetings_location = Column(Text, default='Aula de coordinación')
    admission_requirements = Column(JSON, default=_default_requirements)
    footer_description = Column(
        Text,
        default='Formando jóvenes costarricenses con valores patrióticos, disciplina y honor '
                'desde 1951. Una tradición de más de 70 años al servicio de la patria.',
    )
    mission_statement = Column(
        Text,
        default='Formar estudiantes con valores patrióticos, disciplina militar y amor por '
                'Costa Rica, manteniendo viva la tradición de honor que nos ha caracterizado '
                'por más de siete décadas.',
    )
    leadership_title = Column(Text, default='Tradición de Liderazgo')
    leadership_description = Column(
        Text,
        default='Desde 1951, el Cuerpo de Banderas ha sido dirigido por estudiantes '
                'excepcionales que han demostrado los más altos estándares de disciplina, '
                'patriotismo y liderazgo.',
    )
    leadership_image_url = Column(Text)
    leadership_image_s3_key = Column(Text)
    founding_year = Column(Integer, nullable=False, default=1951)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
