translations = {
    # Common
    "common": {
        "appName": "Ummi's Collection",
        "language": "Langue",
        "theme": {
            "light": "Thème clair",
            "dark": "Thème sombre",
        },
        "loading": "Chargement...",
        "error": "Une erreur est survenue",
        "notFound": "Page non trouvée",
        "backHome": "Retour à l'accueil",
        "noProducts": "Aucun produit trouvé",
    },

    # Header / footer
    "navigation": {
        "home": "Accueil",
        "products": "Produits",
        "contact": "Contact",
        "admin": "Admin",
    },

    # Home
    "home": {
        "welcome": "Bienvenue chez Ummi's Collection",
        "subtitle": "Spécialiste des vêtements féminins à Douala",
        "shopNow": {
            "fr": "Commander via WhatsApp",
            "en": "Order via WhatsApp",
        },
        "featuredProducts": "Produits populaires",
        "viewAll": "Voir tout",
    },

    # Products
    "products": {
        "title": "Nos produits",
        "allCategories": "Toutes les catégories",
        "category": {
            "abaya": "Abayas",
            "jallabiya": "Jallabiyas",
            "tshirt": "T-shirts",
            "handbag": "Sacs à main",
        },
        "loadMore": "Charger plus",
        "price": "Prix",
        "orderViaWhatsApp": {
            "fr": (
                "Bonjour, je suis intéressé(e) par {productName} vu sur Ummi's Collection. "
                "Le prix est de {price} FCFA.\n"
                "Vous pouvez voir le produit ici : {productUrl}"
            ),
            "en": (
                "Hello, I am interested in {productName} from Ummi's Collection. "
                "The price is {price} FCFA.\n"
                "You can view the product here: {productUrl}"
            ),
        },
        "currency": "FCFA",
    },

    # Contact
    "contact": {
        "title": "Contactez-nous",
        "subtitle": "Nous sommes à votre disposition pour répondre à vos questions",
        "whatsApp": "WhatsApp",
        "facebook": "Facebook",
        "tiktok": "TikTok",
        "location": "Localisation",
        "locationDetail": "Douala Kilometers 5",
    },

    # Admin
    "admin": {
        "login": {
            "title": "Connexion Admin",
            "email": "Email",
            "password": "Mot de passe",
            "submit": "Se connecter",
            "error": "Email ou mot de passe incorrect",
        },
        "dashboard": {
            "title": "Tableau de bord",
            "welcome": "Bienvenue sur le tableau de bord d'administration",
            "logout": "Déconnexion",
            "exportExcel": "Exporter (Excel)",
            "exportPdf": "Exporter (PDF)",
            "empty": "Aucun produit. Ajoutez votre premier produit !",
            "actions": "Actions",
            "createdAt": "Créé le",
            "updatedAt": "Modifié le",
            "priceList": "Liste de prix",
            "generatedOn": "Généré le",
            "sheet": "Produits",
        },
        "products": {
            "title": "Gestion des produits",
            "add": "Ajouter un produit",
            "edit": "Modifier",
            "delete": "Supprimer",
            "confirm": "Êtes-vous sûr de vouloir supprimer ce produit ?",
            "cancel": "Annuler",
            "name": "Nom",
            "description": "Description",
            "price": "Prix",
            "category": "Catégorie",
            "image": "Image",
            "chooseFile": "Choisir un fichier",
            "noFile": "Aucun fichier choisi",
            "save": "Enregistrer",
            "resetForm": "Réinitialiser",
            "validation": {
                "nameRequired": "Le nom est requis",
                "descriptionRequired": "La description est requise",
                "priceRequired": "Le prix est requis",
                "priceNumeric": "Le prix doit être un nombre",
                "categoryRequired": "La catégorie est requise",
                "imageRequired": "L'image est requise",
            },
            "success": {
                "create": "Produit créé avec succès",
                "update": "Produit mis à jour avec succès",
                "delete": "Produit supprimé avec succès",
            },
        },
    },
}
