"""
Notification e-mail templates

French subjects and HTML bodies for every event kind. Values coming from
payloads are HTML-escaped; missing optional values get a fixed placeholder.
"""

from html import escape
from typing import Any, Iterable, Optional, Tuple

from core.config.email_config import EmailConfig

from microservices.account_service.events.models import (
    AccountActivatedPayload,
    AccountDeactivatedPayload,
    ActorManagerWelcomePayload,
)
from microservices.actor_service.events.models import (
    ActorActivatedPayload,
    ActorDeactivatedPayload,
    BuyerAddedToExporterPayload,
    BuyerAssignedAsMandatairePayload,
    BuyerRemovedFromExporterPayload,
    BuyerUnassignedAsMandatairePayload,
    ProducerAddedToOpaPayload,
    ProducerRemovedFromOpaPayload,
)
from microservices.campaign_service.events.models import (
    BuyerConventionsStatusPayload,
    CampaignActivatedPayload,
    OpaConventionsStatusPayload,
    StoresStatusPayload,
)
from microservices.convention_service.events.models import (
    AmendedConvention,
    ConventionAssociatedToCampaignPayload,
    ConventionCreatedPayload,
    ConventionDissociatedFromCampaignPayload,
    ConventionUpdatedPayload,
    SignedConvention,
)
from microservices.store_service.constants import store_type_label
from microservices.store_service.events.models import (
    OccupantAssignedPayload,
    OccupantUnassignedPayload,
    StoreActivatedPayload,
    StoreDeactivatedPayload,
)

from .models import RenderedEmail

NOT_AVAILABLE = "N/A"
NO_REASON = "Aucune raison spécifiée"
NO_LOCATION = "Non spécifiée"

Rows = Iterable[Tuple[str, Any]]
# (name, type) of the other party to a convention
Partner = Tuple[str, str]


def _or(value: Optional[Any], placeholder: str) -> Any:
    return placeholder if value is None or value == "" else value


class EmailTemplates:
    """Renders one e-mail per (event payload, recipient name)"""

    def __init__(self, config: EmailConfig):
        self.config = config

    # ====================
    # Layout
    # ====================

    def _subject(self, text: str) -> str:
        return f"{text} - {self.config.app_name}"

    def _render(
        self,
        subject: str,
        user_name: str,
        paragraphs: Iterable[str],
        rows: Rows = (),
        show_support: bool = True,
    ) -> RenderedEmail:
        cfg = self.config
        greeting = f"Bonjour {escape(user_name)}," if user_name else "Bonjour,"
        body = "".join(f"<p>{p}</p>" for p in paragraphs)

        table = ""
        rows = list(rows)
        if rows:
            cells = "".join(
                f"<tr><td><strong>{escape(label)}</strong></td><td>{escape(str(value))}</td></tr>"
                for label, value in rows
            )
            table = f'<table style="border: 1px solid #ddd; padding: 10px;">{cells}</table>'

        support = ""
        if show_support:
            contact = escape(cfg.support_email)
            if cfg.support_phone:
                contact += f" / {escape(cfg.support_phone)}"
            support = f"<p>Pour toute question, contactez le support : {contact}</p>"

        html = (
            f"<h2>{escape(subject)}</h2>"
            f"<p>{greeting}</p>"
            f"{body}{table}"
            f'<p><a href="{escape(cfg.frontend_url)}">Accéder à {escape(cfg.app_name)}</a></p>'
            f"{support}"
            f"<p>&copy; {cfg.year} {escape(cfg.app_name)}</p>"
        )
        return RenderedEmail(subject=self._subject(subject), html=html)

    # ====================
    # Actor
    # ====================

    def actor_activated(self, user_name: str, p: ActorActivatedPayload) -> RenderedEmail:
        return self._render(
            "Votre organisation a été activée",
            user_name,
            [f"L'organisation <strong>{escape(p.actor_name)}</strong> a été activée."],
            [("Organisation", p.actor_name), ("Type", p.actor_type)],
        )

    def actor_deactivated(self, user_name: str, p: ActorDeactivatedPayload) -> RenderedEmail:
        return self._render(
            "Votre organisation a été désactivée",
            user_name,
            [f"L'organisation <strong>{escape(p.actor_name)}</strong> a été désactivée."],
            [("Organisation", p.actor_name), ("Type", p.actor_type)],
        )

    def producer_added_to_opa(self, user_name: str, p: ProducerAddedToOpaPayload) -> RenderedEmail:
        return self._render(
            "Nouveau producteur ajouté à votre OPA",
            user_name,
            [f"Le producteur <strong>{escape(p.producer_name)}</strong> a été ajouté à l'OPA "
             f"<strong>{escape(p.opa_name)}</strong>."],
        )

    def producer_removed_from_opa(self, user_name: str, p: ProducerRemovedFromOpaPayload) -> RenderedEmail:
        return self._render(
            "Producteur retiré de votre OPA",
            user_name,
            [f"Le producteur <strong>{escape(p.producer_name)}</strong> a été retiré de l'OPA "
             f"<strong>{escape(p.opa_name)}</strong>."],
        )

    def buyer_added_to_exporter(self, user_name: str, p: BuyerAddedToExporterPayload) -> RenderedEmail:
        return self._render(
            "Nouveau mandataire ajouté à votre exportateur",
            user_name,
            [f"L'acheteur <strong>{escape(p.buyer_name)}</strong> est désormais mandataire de "
             f"<strong>{escape(p.exporter_name)}</strong>."],
        )

    def buyer_removed_from_exporter(self, user_name: str, p: BuyerRemovedFromExporterPayload) -> RenderedEmail:
        return self._render(
            "Mandataire retiré de votre exportateur",
            user_name,
            [f"L'acheteur <strong>{escape(p.buyer_name)}</strong> n'est plus mandataire de "
             f"<strong>{escape(p.exporter_name)}</strong>."],
        )

    def buyer_assigned_as_mandataire(self, user_name: str, p: BuyerAssignedAsMandatairePayload) -> RenderedEmail:
        return self._render(
            "Vous avez été affecté comme mandataire",
            user_name,
            [f"<strong>{escape(p.buyer_name)}</strong> a été affecté comme mandataire de l'exportateur "
             f"<strong>{escape(p.exporter_name)}</strong>."],
        )

    def buyer_unassigned_as_mandataire(
        self, user_name: str, p: BuyerUnassignedAsMandatairePayload
    ) -> RenderedEmail:
        return self._render(
            "Vous avez été retiré comme mandataire",
            user_name,
            [f"<strong>{escape(p.buyer_name)}</strong> n'est plus mandataire de l'exportateur "
             f"<strong>{escape(p.exporter_name)}</strong>."],
        )

    # ====================
    # Campaign
    # ====================

    def campaign_activated(self, user_name: str, p: CampaignActivatedPayload) -> RenderedEmail:
        extra = p.campaign.model_extra or {}
        return self._render(
            f"Nouvelle campagne activée : {p.campaign.code}",
            user_name,
            [f"La campagne <strong>{escape(p.campaign.code)}</strong> a été activée par "
             f"{escape(p.activated_by.full_name)}."],
            [
                ("Code", p.campaign.code),
                ("Début", _or(extra.get("startDate"), NOT_AVAILABLE)),
                ("Fin", _or(extra.get("endDate"), NOT_AVAILABLE)),
            ],
        )

    def stores_status(self, user_name: str, p: StoresStatusPayload) -> RenderedEmail:
        return self._render(
            f"Alerte: Magasins non associés à la campagne {p.campaign.code}",
            user_name,
            [f"{p.inactive_stores} magasin(s) ne sont pas encore associés à la campagne "
             f"<strong>{escape(p.campaign.code)}</strong>."],
            [
                ("Campagne", f"{p.campaign.code} ({p.campaign.start_date} - {p.campaign.end_date})"),
                ("Total", p.total_stores),
                ("Actifs", p.active_stores),
                ("Inactifs", p.inactive_stores),
                ("Activée par", p.activated_by.full_name),
            ],
        )

    def opa_conventions_status(self, user_name: str, p: OpaConventionsStatusPayload) -> RenderedEmail:
        counts = p.conventions_data
        return self._render(
            f"Action requise: Associez vos conventions à la campagne {p.campaign.code}",
            user_name,
            [f"{counts.inactive_conventions} convention(s) de <strong>{escape(p.opa.full_name)}</strong> "
             f"ne sont pas associées à la campagne <strong>{escape(p.campaign.code)}</strong>."],
            [
                ("Campagne", f"{p.campaign.code} ({p.campaign.start_date} - {p.campaign.end_date})"),
                ("Total", counts.total_conventions),
                ("Actives", counts.active_conventions),
                ("Inactives", counts.inactive_conventions),
                ("Activée par", p.activated_by.full_name),
            ],
        )

    def buyer_conventions_status(self, user_name: str, p: BuyerConventionsStatusPayload) -> RenderedEmail:
        counts = p.conventions_data
        return self._render(
            f"Information: Conventions non associées à la campagne {p.campaign.code}",
            user_name,
            [f"{counts.inactive_conventions} convention(s) de <strong>{escape(p.buyer.full_name)}</strong> "
             f"ne sont pas associées à la campagne <strong>{escape(p.campaign.code)}</strong>."],
            [
                ("Campagne", f"{p.campaign.code} ({p.campaign.start_date} - {p.campaign.end_date})"),
                ("Total", counts.total_conventions),
                ("Actives", counts.active_conventions),
                ("Inactives", counts.inactive_conventions),
                ("Activée par", p.activated_by.full_name),
            ],
        )

    # ====================
    # Store
    # ====================

    def occupant_assigned(self, user_name: str, p: OccupantAssignedPayload) -> RenderedEmail:
        return self._render(
            "Affectation à un magasin",
            user_name,
            [f"<strong>{escape(p.actor.full_name)}</strong> a été affecté au magasin "
             f"<strong>{escape(p.store.name)}</strong>."],
            [
                ("Magasin", p.store.name),
                ("Code", _or(p.store.code, NOT_AVAILABLE)),
                ("Affecté par", p.assigned_by.full_name),
            ],
        )

    def occupant_unassigned(self, user_name: str, p: OccupantUnassignedPayload) -> RenderedEmail:
        return self._render(
            "Retrait d'un magasin",
            user_name,
            [f"<strong>{escape(p.actor.full_name)}</strong> a été retiré du magasin "
             f"<strong>{escape(p.store.name)}</strong>."],
            [
                ("Magasin", p.store.name),
                ("Code", _or(p.store.code, NOT_AVAILABLE)),
                ("Retiré par", p.unassigned_by.full_name),
            ],
        )

    def _store_rows(self, p, occupant_name: str, by_label: str, by_name: str) -> Rows:
        store_type = store_type_label(p.store.store_type.value) if p.store.store_type else None
        return [
            ("Magasin", p.store.name),
            ("Code", _or(p.store.code, NOT_AVAILABLE)),
            ("Type", _or(store_type, NOT_AVAILABLE)),
            ("Campagne", f"{p.campaign.code} ({p.campaign.start_date} - {p.campaign.end_date})"),
            ("Occupant", occupant_name),
            (by_label, by_name),
        ]

    def store_activated(self, user_name: str, p: StoreActivatedPayload, occupant_name: str) -> RenderedEmail:
        return self._render(
            "Magasin activé",
            user_name,
            [f"Le magasin <strong>{escape(p.store.name)}</strong> est activé pour la campagne "
             f"<strong>{escape(p.campaign.code)}</strong>."],
            self._store_rows(p, occupant_name, "Activé par", p.activated_by.full_name),
        )

    def store_deactivated(self, user_name: str, p: StoreDeactivatedPayload, occupant_name: str) -> RenderedEmail:
        return self._render(
            "Magasin désactivé",
            user_name,
            [f"Le magasin <strong>{escape(p.store.name)}</strong> est désactivé pour la campagne "
             f"<strong>{escape(p.campaign.code)}</strong>."],
            self._store_rows(p, occupant_name, "Désactivé par", p.deactivated_by.full_name),
        )

    # ====================
    # Convention
    # ====================

    def _signed_products(self, convention: SignedConvention) -> Rows:
        return [
            (f"Produit {line.code}", f"{line.name} : {line.quantity:g} {line.unit}")
            for line in convention.products
        ]

    def _amended_products(self, convention: AmendedConvention) -> Rows:
        rows = []
        for line in convention.products:
            details = ", ".join(
                str(part) for part in (
                    line.quality,
                    line.standard,
                    f"{line.weight:g} kg" if line.weight is not None else None,
                    f"{line.bags} sacs" if line.bags is not None else None,
                    f"{line.price_per_kg:g} FCFA/kg" if line.price_per_kg is not None else None,
                    f"humidité {line.humidity:g} %" if line.humidity is not None else None,
                ) if part is not None
            )
            rows.append((f"Produit {line.code}", f"{line.name} ({details})" if details else line.name))
        return rows

    def convention_created(
        self, user_name: str, p: ConventionCreatedPayload, partner: Partner
    ) -> RenderedEmail:
        partner_name, partner_type = partner
        return self._render(
            f"Nouvelle convention créée : {p.convention.code}",
            user_name,
            [f"Une convention a été créée avec <strong>{escape(partner_name)}</strong> ({escape(partner_type)}) "
             f"par {escape(p.created_by.full_name)}."],
            [("Convention", p.convention.code), ("Date de signature", p.convention.signature_date)]
            + list(self._signed_products(p.convention)),
        )

    def convention_created_summary(self, user_name: str, p: ConventionCreatedPayload) -> RenderedEmail:
        """Sent to the OPA that created its own convention"""
        partner = p.buyer_exporter
        return self._render(
            f"Confirmation de création de convention : {p.convention.code}",
            user_name,
            [f"Votre convention avec <strong>{escape(partner.full_name)}</strong> "
             f"({escape(partner.actor_type)}) a bien été enregistrée."],
            [("Convention", p.convention.code), ("Date de signature", p.convention.signature_date)]
            + list(self._signed_products(p.convention)),
        )

    def convention_updated(
        self, user_name: str, p: ConventionUpdatedPayload, partner: Partner
    ) -> RenderedEmail:
        partner_name, partner_type = partner
        changes = p.changes
        paragraphs = [
            f"La convention <strong>{escape(p.convention.code)}</strong> avec "
            f"<strong>{escape(partner_name)}</strong> ({escape(partner_type)}) a été modifiée par "
            f"{escape(p.updated_by.full_name)}."
        ]
        if changes.signature_date_changed:
            paragraphs.append(
                f"Date de signature : {escape(_or(changes.old_signature_date, NOT_AVAILABLE))} "
                f"&rarr; {escape(_or(changes.new_signature_date, NOT_AVAILABLE))}"
            )
        if changes.products_changed:
            paragraphs.append("Les produits de la convention ont été modifiés.")
        return self._render(
            f"Convention modifiée : {p.convention.code}",
            user_name,
            paragraphs,
            [("Convention", p.convention.code), ("Date de signature", p.convention.signature_date)]
            + list(self._amended_products(p.convention)),
        )

    def _campaign_link_rows(self, p, partner: Partner, by_label: str, by_name: str) -> Rows:
        partner_name, partner_type = partner
        return [
            ("Convention", p.convention.code),
            ("Date de signature", p.convention.signature_date),
            ("Campagne", f"{p.campaign.code} ({p.campaign.start_date} - {p.campaign.end_date})"),
            ("Partenaire", f"{partner_name} ({partner_type})"),
            (by_label, by_name),
        ]

    def convention_associated_to_campaign(
        self, user_name: str, p: ConventionAssociatedToCampaignPayload, partner: Partner
    ) -> RenderedEmail:
        return self._render(
            f"Convention associée à la campagne {p.campaign.code}",
            user_name,
            [f"La convention <strong>{escape(p.convention.code)}</strong> est associée à la campagne "
             f"<strong>{escape(p.campaign.code)}</strong>."],
            self._campaign_link_rows(p, partner, "Associée par", p.associated_by.full_name),
        )

    def convention_dissociated_from_campaign(
        self, user_name: str, p: ConventionDissociatedFromCampaignPayload, partner: Partner
    ) -> RenderedEmail:
        return self._render(
            f"Convention dissociée de la campagne {p.campaign.code}",
            user_name,
            [f"La convention <strong>{escape(p.convention.code)}</strong> n'est plus associée à la campagne "
             f"<strong>{escape(p.campaign.code)}</strong>."],
            self._campaign_link_rows(p, partner, "Dissociée par", p.dissociated_by.full_name),
        )

    # ====================
    # User
    # ====================

    def account_activated(self, p: AccountActivatedPayload) -> RenderedEmail:
        return self._render(
            "Votre compte a été activé",
            p.user_name,
            ["Votre compte est de nouveau actif, vous pouvez vous connecter."],
        )

    def account_deactivated(self, p: AccountDeactivatedPayload) -> RenderedEmail:
        return self._render(
            "Votre compte a été désactivé",
            p.user_name,
            ["Votre compte a été désactivé."],
            [("Raison", _or(p.reason, NO_REASON))],
        )

    def actor_manager_welcome(self, p: ActorManagerWelcomePayload) -> RenderedEmail:
        info = p.actor_info
        return self._render(
            "Bienvenue en tant que Manager",
            p.user_name,
            [
                f"Un compte manager a été créé pour vous sur {escape(self.config.app_name)}.",
                "Vous devrez changer votre mot de passe temporaire à la première connexion.",
            ],
            [
                ("Identifiant", p.username),
                ("Mot de passe temporaire", p.temp_password),
                ("Acteur", info.name),
                ("Type", info.type),
                ("Localisation", _or(info.location, NO_LOCATION)),
                ("Connexion", f"{self.config.frontend_url}/auth/login"),
            ],
        )
