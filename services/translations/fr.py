# -*- coding: utf-8 -*-
"""French translations."""

FR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Erreur",
    "dialog.warning": "Attention",
    "dialog.success": "Succès",
    "dialog.confirm": "Confirmer",

    # Buttons
    "button.back": "Retour",
    "button.next": "Suivant",
    "button.submit": "Créer l'événement",
    "button.choose_image": "Choisir un visuel",

    # Wizard
    "wizard.title": "Création d'événement",
    "wizard.step_progress": "Étape {current} sur {total}",
    "wizard.submitting": "Envoi en cours...",

    # Steps
    "step.general.title": "Informations générales de l'événement",
    "step.general.subtitle": "Veuillez renseignez les informations ci-dessous",
    "step.dates.title": "Dates de l'événement",
    "step.dates.subtitle": "Choisir les dates et heures de début et de fin de l'événement",
    "step.image.title": "Affiche de l'événement",
    "step.image.subtitle": "Choisir un visuel *",
    "step.price.title": "Tarif de l'événement",
    "step.price.subtitle": "Veuillez renseigner un tarif, 0 si l'événement est gratuit",
    "step.details.title": "Description et lien url",
    "step.details.subtitle": "Veuillez fournir une brève description et un lien url d'un site",

    # Field labels
    "field.name": "Nom de l'événement *",
    "field.address": "Adresse *",
    "field.zipCode": "Code postal *",
    "field.city": "Ville *",
    "field.startingDate": "Début *",
    "field.endingDate": "Fin",
    "field.endingDate.placeholder": "Heure de fin (optionnel)",
    "field.date.placeholder": "AAAA-MM-JJ",
    "field.image": "Visuel",
    "field.image.none": "Aucun fichier sélectionné",
    "field.image.filter": "Images (*.png *.jpg *.jpeg)",
    "field.price": "Tarif *",
    "field.description": "Description *",
    "field.website": "Lien url de l'événement (optionnel)",

    # Validation
    "validation.name.required": "Le nom de l'événement est requis",
    "validation.address.required": "L'adresse de l'événement est requis",
    "validation.zipCode.invalid": "Le code postal est requis",
    "validation.city.required": "La ville est requise",
    "validation.startingDate.required": "Une date de début est requise",
    "validation.image.required": "Un visuel est requis",
    "validation.image.not_file": "L'image n'est pas valide",
    "validation.image.type": "Le fichier sélectionné n'est pas une image",
    "validation.price.type": "Un tarif est obligatoire, mettre 0 si gratuit",
    "validation.price.min": "Le tarif doit être positif",
    "validation.description.required": "Une description est requise",
    "validation.check_data": "Veuillez vérifier les informations saisies",

    # Submission
    "success.event_created": "Événement créé avec succès !",
    "error.submission.presign": "Impossible de préparer l'envoi du visuel.",
    "error.submission.upload": "L'envoi du visuel a échoué.",
    "error.submission.create": "La création de l'événement a échoué.",
    "error.submission.cancelled": "L'envoi a été annulé.",
    "error.api.connection": "Erreur de connexion. Veuillez vérifier votre connexion internet.",
    "error.api.timeout": "Le serveur ne répond pas. Veuillez réessayer.",
    "error.api.unknown": "Une erreur inattendue est survenue. Veuillez réessayer.",
}
