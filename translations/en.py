translations = {
    # Common
    "common": {
        "appName": "Ummi's Collection",
        "language": "Language",
        "theme": {
            "light": "Light theme",
            "dark": "Dark theme",
        },
        "loading": "Loading...",
        "error": "An error occurred",
        "notFound": "Page not found",
        "backHome": "Back to home",
        "noProducts": "No products found",
    },

    # Header / footer
    "navigation": {
        "home": "Home",
        "products": "Products",
        "contact": "Contact",
        "admin": "Admin",
    },

    # Home
    "home": {
        "welcome": "Welcome to Ummi's Collection",
        "subtitle": "Specialist in women's clothing in Douala",
        "shopNow": {
            "fr": "Commander via WhatsApp",
            "en": "Order via WhatsApp",
        },
        "featuredProducts": "Featured Products",
        "viewAll": "View All",
    },

    # Products
    "products": {
        "title": "Our Products",
        "allCategories": "All Categories",
        "category": {
            "abaya": "Abayas",
            "jallabiya": "Jallabiyas",
            "tshirt": "T-shirts",
            "handbag": "Handbags",
        },
        "loadMore": "Load More",
        "price": "Price",
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
        "title": "Contact Us",
        "subtitle": "We are here to answer your questions",
        "whatsApp": "WhatsApp",
        "facebook": "Facebook",
        "tiktok": "TikTok",
        "location": "Location",
        "locationDetail": "Douala Kilometers 5",
    },

    # Admin
    "admin": {
        "login": {
            "title": "Admin Login",
            "email": "Email",
            "password": "Password",
            "submit": "Login",
            "error": "Invalid email or password",
        },
        "dashboard": {
            "title": "Dashboard",
            "welcome": "Welcome to the admin dashboard",
            "logout": "Logout",
            "exportExcel": "Export (Excel)",
            "exportPdf": "Export (PDF)",
            "empty": "No products found. Add your first product!",
            "actions": "Actions",
            "createdAt": "Created",
            "updatedAt": "Updated",
            "priceList": "Price list",
            "generatedOn": "Generated on",
            "sheet": "Products",
        },
        "products": {
            "title": "Product Management",
            "add": "Add Product",
            "edit": "Edit",
            "delete": "Delete",
            "confirm": "Are you sure you want to delete this product?",
            "cancel": "Cancel",
            "name": "Name",
            "description": "Description",
            "price": "Price",
            "category": "Category",
            "image": "Image",
            "chooseFile": "Choose file",
            "noFile": "No file chosen",
            "save": "Save",
            "resetForm": "Reset",
            "validation": {
                "nameRequired": "Name is required",
                "descriptionRequired": "Description is required",
                "priceRequired": "Price is required",
                "priceNumeric": "Price must be a number",
                "categoryRequired": "Category is required",
                "imageRequired": "Image is required",
            },
            "success": {
                "create": "Product created successfully",
                "update": "Product updated successfully",
                "delete": "Product deleted successfully",
            },
        },
    },
}
