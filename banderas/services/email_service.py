"""
Welcome email delivery.

Messages are rendered from the bilingual Jinja2 templates under
``banderas/templates/email`` and delivered over SMTP with aiosmtplib.
``EMAIL_DRY_RUN=true`` renders and logs without connecting.
"""

import os
import re
import asyncio
import logging
from typing import Optional, Dict, Any, List
from pathlib import Path
from email.message import EmailMessage

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from banderas.errors import WelcomeEmailError
from banderas.utils.redact import mask_email
from banderas.utils.runtime import env_flag

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

SUPPORTED_LANGUAGES = ("es", "en")

_TAG = re.compile(r'<[^>]+>')
_BLANK_RUN = re.compile(r'\s+')
_ENTITIES = {'&amp;': '&', '&lt;': '<', '&gt;': '>', '&quot;': '"', '&#39;': "'"}

# Per-language copy; "{site}" is replaced with the configured site name.
WELCOME_COPY = {
    'es': {
        'subject': "¡Bienvenido al {site}!",
        'title': "Bienvenido al {site}",
        'greeting': 'Hola',
        'fallback_name': 'Usuario',
        'intro': (
            "Tu correo ha sido verificado y tu cuenta del {site} está lista. "
            "Desde el panel de administración podrás mantener al día la historia, "
            "las jefaturas, los escudos y las galerías de fotos del sitio."
        ),
        'cta_label': 'Ir al panel de administración',
        'closing': 'Honor, disciplina y patriotismo.',
    },
    'en': {
        'subject': "Welcome to {site}!",
        'title': "Welcome to {site}",
        'greeting': 'Hello',
        'fallback_name': 'User',
        'intro': (
            "Your email has been verified and your {site} account is ready. "
            "From the admin panel you can keep the site's history, leadership "
            "roster, shields and photo galleries up to date."
        ),
        'cta_label': 'Open the admin panel',
        'closing': 'Honor, discipline and patriotism.',
    },
}


class EmailServiceConfig:
    """SMTP and sender settings read from the environment."""

    def __init__(self):
        self.smtp_host = os.getenv('SMTP_HOST', 'localhost')
        self.smtp_port = int(os.getenv('SMTP_PORT', '587'))
        self.smtp_username = os.getenv('SMTP_USERNAME', '')
        self.smtp_password = os.getenv('SMTP_PASSWORD', '')
        self.smtp_use_tls = env_flag('SMTP_USE_TLS', True)
        self.smtp_use_ssl = env_flag('SMTP_USE_SSL', False)
        self.from_email = os.getenv('FROM_EMAIL', 'noreply@cuerpodebanderas.cr')
        self.from_name = os.getenv('FROM_NAME', 'Cuerpo de Banderas')
        self.reply_to_email = os.getenv('REPLY_TO_EMAIL', '')
        self.dry_run = env_flag('EMAIL_DRY_RUN', False)
        self.frontend_url = os.getenv('FRONTEND_URL', 'http://localhost:5000').rstrip('/')
        self.site_name = os.getenv('SITE_NAME', 'Cuerpo de Banderas')
        self.template_dir = os.getenv('EMAIL_TEMPLATE_DIR', str(DEFAULT_TEMPLATE_DIR))

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_email}>"

    def missing_settings(self) -> List[str]:
        """Names of the settings that must be fixed before mail can go out."""
        problems = []
        if not self.smtp_host:
            problems.append('SMTP_HOST')
        if self.smtp_port <= 0:
            problems.append('SMTP_PORT')
        if not self.from_email:
            problems.append('FROM_EMAIL')
        if self.smtp_use_ssl and self.smtp_use_tls:
            problems.append('SMTP_USE_SSL/SMTP_USE_TLS')
        return problems


def html_to_text(html_content: str) -> str:
    """Plain-text body for templates that ship without a ``.txt`` part."""
    text = _TAG.sub('', html_content)
    for entity, char in _ENTITIES.items():
        text = text.replace(entity, char)
    return _BLANK_RUN.sub(' ', text).strip()


class EmailService:
    def __init__(self, config: Optional[EmailServiceConfig] = None):
        self.config = config or EmailServiceConfig()
        template_path = Path(self.config.template_dir)
        if not template_path.is_dir():
            logger.warning("Email template directory not found: %s", template_path)
        self.templates = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(['html']),
        )

    def render_template(self, name: str, context: Dict[str, Any]) -> tuple[str, str]:
        """Return ``(html, text)`` for ``name``; text falls back to stripped HTML."""
        html_content = self.templates.get_template(f"{name}.html").render(**context)
        try:
            text_content = self.templates.get_template(f"{name}.txt").render(**context)
        except TemplateNotFound:
            text_content = html_to_text(html_content)
        return html_content, text_content

    def _build_message(self, to_email: str, subject: str, html_content: str, text_content: Optional[str]) -> EmailMessage:
        message = EmailMessage()
        message['From'] = self.config.sender
        message['To'] = to_email
        message['Subject'] = subject
        if self.config.reply_to_email:
            message['Reply-To'] = self.config.reply_to_email
        message.set_content(text_content or html_to_text(html_content))
        message.add_alternative(html_content, subtype='html')
        return message

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Deliver one message. Never raises; the outcome is in ``success``/``error``."""
        missing = self.config.missing_settings()
        if missing:
            return {'success': False, 'error': f"Email not configured: {', '.join(missing)}"}

        message = self._build_message(to_email, subject, html_content, text_content)
        use_ssl = self.config.smtp_use_ssl
        try:
            async with aiosmtplib.SMTP(
                hostname=self.config.smtp_host,
                port=self.config.smtp_port,
                use_tls=use_ssl,
                start_tls=self.config.smtp_use_tls and not use_ssl,
            ) as smtp:
                if self.config.smtp_username and self.config.smtp_password:
                    await smtp.login(self.config.smtp_username, self.config.smtp_password)
                response = await smtp.send_message(message)
        except Exception as e:
            logger.error("SMTP delivery to %s failed", mask_email(to_email), exc_info=True)
            return {'success': False, 'error': str(e)}

        logger.info("Email sent to %s: %s", mask_email(to_email), subject)
        return {'success': True, 'smtp_response': response}

    def welcome_context(self, full_name: str, language: str = 'es') -> Dict[str, Any]:
        """Template variables for the welcome email in ``language``."""
        site = self.config.site_name
        copy = WELCOME_COPY.get(language, WELCOME_COPY['es'])
        context = {key: value.format(site=site) for key, value in copy.items() if key != 'fallback_name'}
        context.update(
            language=language if language in WELCOME_COPY else 'es',
            full_name=full_name,
            site_name=site,
            site_url=f"{self.config.frontend_url}/",
            admin_url=f"{self.config.frontend_url}/admin",
            footer=f"{site} - Liceo de Costa Rica",
        )
        return context

    def send_welcome_email(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        language: str = 'es',
    ) -> Dict[str, Any]:
        """Render and deliver the welcome email; raise WelcomeEmailError on failure."""
        language = language if language in SUPPORTED_LANGUAGES else 'es'
        full_name = " ".join(part for part in (first_name, last_name) if part)
        full_name = full_name or WELCOME_COPY[language]['fallback_name']

        try:
            context = self.welcome_context(full_name, language)
            html_content, text_content = self.render_template('welcome', context)
        except Exception as e:
            logger.error("Failed to render welcome email (%s)", language, exc_info=True)
            raise WelcomeEmailError(f"Failed to render welcome email: {e}") from e

        if self.config.dry_run:
            logger.info(
                "EMAIL_DRY_RUN: welcome email for %s (%s) subject=%r, %d characters",
                mask_email(email), language, context['subject'], len(html_content),
            )
            return {'success': True, 'dry_run': True}

        result = send_email_sync(email, context['subject'], html_content, text_content, service=self)
        if not result.get('success'):
            raise WelcomeEmailError(f"Failed to send welcome email: {result.get('error')}")
        return result


def send_email_sync(
    to_email: str,
    subject: str,
    html_content: str,
    text_content: Optional[str] = None,
    service: Optional[EmailService] = None,
) -> Dict[str, Any]:
    """Blocking wrapper around ``EmailService.send_email`` for sync call sites."""
    email_service = service or EmailService()
    return asyncio.run(email_service.send_email(to_email, subject, html_content, text_content))
