"""Sample listings from Monterrey and Guadalupe, N.L., loaded by the seed operation."""

from typing import Any, Dict, List

SAMPLE_BUSINESSES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "owner_id": "owner1",
        "name": "El Rey del Cabrito",
        "description": "Restaurante tradicional regiomontano especializado en cabrito al pastor desde 1972.",
        "category": "food",
        "location": (25.6674, -100.3089),
        "address": "José María Morelos 937, Centro, Monterrey",
        "phone": "81 8343 3074",
        "email": "contacto@reydelcabrito.com",
        "website": "www.reydelcabrito.com",
        "social_media": {"instagram": "@reydelcabrito"},
        "images": ["cabrito1", "cabrito2"],
        "rating": 4.8,
        "review_count": 1250,
    },
    {
        "id": "2",
        "owner_id": "owner2",
        "name": "Mercado Barrio Antiguo",
        "description": "Mercado de artesanías y productos locales en el corazón del Barrio Antiguo.",
        "category": "retail",
        "location": (25.6677, -100.3092),
        "address": "Calle Mina 534, Centro, Monterrey",
        "phone": "81 8342 5567",
        "email": "mercado@barrioantiguomty.com",
        "website": None,
        "social_media": {"facebook": "MercadoBarrioAntiguo"},
        "images": ["mercado1", "mercado2"],
        "rating": 4.5,
        "review_count": 820,
    },
    {
        "id": "3",
        "owner_id": "owner3",
        "name": "Bicicletería El Pedal",
        "description": "Taller de reparación y venta de bicicletas con más de 25 años de experiencia.",
        "category": "services",
        "location": (25.6715, -100.3452),
        "address": "Av. Vasconcelos 345, San Pedro Garza García",
        "phone": "81 8356 7890",
        "email": "servicio@elpedal.com",
        "website": "www.elpedal.com",
        "social_media": {"instagram": "@elpedalsp"},
        "images": ["bici1", "bici2"],
        "rating": 4.7,
        "review_count": 543,
    },
    {
        "id": "4",
        "owner_id": "owner4",
        "name": "Café Iguana",
        "description": "Icónico bar y venue de música en vivo con más de 30 años de historia.",
        "category": "entertainment",
        "location": (25.6728, -100.3090),
        "address": "Calle Morelos 1264, Centro, Monterrey",
        "phone": "81 8344 7274",
        "email": "eventos@cafeiguana.com",
        "website": "www.cafeiguana.com",
        "social_media": {"instagram": "@cafeignuanamx", "facebook": "CafeIguanaMX"},
        "images": ["iguana1", "iguana2"],
        "rating": 4.6,
        "review_count": 2150,
    },
    {
        "id": "5",
        "owner_id": "owner5",
        "name": "Fruteria Estrella",
        "description": "Fruteria con productos 100% organicos",
        "category": "retail",
        "location": (25.6523517, -100.2029283),
        "address": "Av. Eloy Cavazos 5904, Guadalupe",
        "phone": "81 2934 7689",
        "email": "donraul@gmail.com",
        "website": None,
        "social_media": {"facebook": "Fruteria La Estrella"},
        "images": ["fruteria1", "fruteria2"],
        "rating": 4.5,
        "review_count": 55,
    },
    {
        "id": "6",
        "owner_id": "owner6",
        "name": "Tiendita Los Abuelos",
        "description": "Tienda de productos de primera calidad para el uso diario",
        "category": "retail",
        "location": (25.6784569, -100.2711643),
        "address": "Calle La Molienda 121, Guadalupe",
        "phone": "81 6674 1243",
        "email": "aguila@gmail.com",
        "website": None,
        "social_media": {"facebook": "Tiendita de Los Abuelos"},
        "images": ["tiendita2"],
        "rating": 4.2,
        "review_count": 25,
    },
    {
        "id": "7",
        "owner_id": "owner7",
        "name": "Dulceria Lolita",
        "description": "Tienda para productos de fiesta y botana",
        "category": "retail",
        "location": (25.6582832, -100.1894569),
        "address": "Av. Pablo Livas 405B, Guadalupe",
        "phone": "81 4374 9985",
        "email": "dulce@gmail.com",
        "website": None,
        "social_media": {"facebook": "Dulceria Lolita"},
        "images": ["dulceria1", "dulceria2"],
        "rating": 4.7,
        "review_count": 43,
    },
    {
        "id": "8",
        "owner_id": "owner8",
        "name": "Deposito 2 Amigos",
        "description": "Deposito con todo tipo de bebidas y suplementos para carne asada",
        "category": "retail",
        "location": (25.664386, -100.2528991),
        "address": "Calle Baja California 2718, Guadalupe",
        "phone": "81 4333 9315",
        "email": "losamigos@gmail.com",
        "website": None,
        "social_media": {"facebook": "Deposito 2 Amigos"},
        "images": ["deposito1", "deposito2"],
        "rating": 4.0,
        "review_count": 15,
    },
    {
        "id": "9",
        "owner_id": "owner9",
        "name": "Tacos Gera",
        "description": "Ricos Tacos de Bisteck",
        "category": "food",
        "location": (25.676694, -100.2613924),
        "address": "C. Guadalupe 227A, Guadalupe",
        "phone": "81 1723 5569",
        "email": "tacosGera@gmail.com",
        "website": None,
        "social_media": {"facebook": "Fruteria Don Raúl"},
        "images": ["tacos1", "tacos2"],
        "rating": 4.6,
        "review_count": 132,
    },
    {
        "id": "10",
        "owner_id": "owner10",
        "name": "Neveria Simona",
        "description": "Neveria con gran cantidad y todo tipo de sabores de nieve",
        "category": "food",
        "location": (25.676694, -100.2613924),
        "address": "Calle Glassglow 1140, Guadalupe",
        "phone": "81 3452 4387",
        "email": "heladeriaSimona@gmail.com",
        "website": None,
        "social_media": {"facebook": "Nieves Simona"},
        "images": ["neveria1", "neveria2"],
        "rating": 4.0,
        "review_count": 12,
    },
    {
        "id": "11",
        "owner_id": "owner11",
        "name": "Mariscos Las Palapas",
        "description": "Restaurante de mariscos con excelente ambiente y sabor",
        "category": "food",
        "location": (25.6814921, -100.1696561),
        "address": "Calle Camino las Escobas 1721, Guadalupe",
        "phone": "81 1152 4457",
        "email": "capi@gmail.com",
        "website": None,
        "social_media": {"facebook": "Mariscos La Palapa"},
        "images": ["mariscos1", "martiscos2"],
        "rating": 4.7,
        "review_count": 100,
    },
    {
        "id": "12",
        "owner_id": "owner12",
        "name": "Antojitos Del Parque La Güera",
        "description": "Ricos Antojitos mexicanos con sabor a casa",
        "category": "food",
        "location": (25.654194, -100.1913878),
        "address": "Calle Fátima 7611, Guadalupe",
        "phone": "81 0283 9987",
        "email": "antojitos@gmail.com",
        "website": None,
        "social_media": {"facebook": "Antojitos Doña Luz"},
        "images": ["antojitos1", "antojitos2"],
        "rating": 4.9,
        "review_count": 9,
    },
    {
        "id": "13",
        "owner_id": "owner13",
        "name": "Comidas De La Casa",
        "description": "Ricas comidas de todo tipo de guisos con un autentico sabor a casa",
        "category": "food",
        "location": (25.6704042, -100.2871192),
        "address": "Calle Emiliano Zapata 221, Guadalupe",
        "phone": "81 9543 4327",
        "email": "LaCasa@gmail.com",
        "website": None,
        "social_media": {"facebook": "Güisos La Casa"},
        "images": ["comidas2"],
        "rating": 4.3,
        "review_count": 73,
    },
    {
        "id": "14",
        "owner_id": "owner14",
        "name": "Marco Leds Y Mas",
        "description": "Venta de Focos Led al Por Mayor.!!!",
        "category": "services",
        "location": (25.6597197, -100.2743101),
        "address": "José Peón Contreras, C. Bosques de La Pastora 2500, 67174 Guadalupe, N.L.",
        "phone": "8113911517",
        "email": "marcosledymass@gmail.com",
        "website": "www.marcoledsymas.org",
        "social_media": {"facebook": "Marco Leds y Mas a Mayoreo SOLO Instaladores"},
        "images": ["Led1", "Led2"],
        "rating": 4.7,
        "review_count": 172,
    },
    {
        "id": "15",
        "owner_id": "owner15",
        "name": "La Comedia Show Live",
        "description": (
            "Eventos a Beneficio, Privados y Especiales , Shows en Vivo, Somos el Más Grande en Comedia"
        ),
        "category": "entertainment",
        "location": (25.6840395, -100.2944127),
        "address": "Prol Madero 3809 Ote, Fierro, 64590 Monterrey, N.L.",
        "phone": "8118616565",
        "email": "comediashowlive@gmail.com",
        "website": "la-comedia-show-live.ueniweb.com",
        "social_media": {"instagram": "la_comedia_show_live", "facebook": "La Comedia Show Live"},
        "images": ["Comedia1", "Comedia2"],
        "rating": 4.4,
        "review_count": 504,
    },
    {
        "id": "16",
        "owner_id": "owner16",
        "name": "La Horda Bar Arcade",
        "description": (
            "Somos el primer Restaurant Bar Arcade Retro para adultos en el país "
            "con maquinitas totalmente originales."
        ),
        "category": "entertainment",
        "location": (25.6678111, -100.3083628),
        "address": "C. Diego de Montemayor 827 sur, Barrio Antiguo, Centro, 64000 Monterrey, N.L.",
        "phone": "8143128056",
        "email": "lahordabararcade@gmail.com",
        "website": "www.lahordabar.com",
        "social_media": {
            "instagram": "lahordabararcade",
            "facebook": "La Horda Bar Arcade",
            "tiktok": "lahordabararcade",
        },
        "images": ["Arcade1", "Arcade2"],
        "rating": 4.8,
        "review_count": 7939,
    },
    {
        "id": "17",
        "owner_id": "owner17",
        "name": "Arma tu PC Monterrey",
        "description": "Tienda de accesorios informáticos.",
        "category": "services",
        "location": (25.6550179, -100.2709201),
        "address": "José López portillo 2136, colonia 25 de noviembre, 67174 Guadalupe, N.L.",
        "phone": "5659166819",
        "email": "Contacto@tunuevapcgamer.com",
        "website": "www.armatupcmonterrey.com",
        "social_media": {"facebook": "Tu Nueva PC Gamer"},
        "images": ["pc1", "pc2"],
        "rating": 5.0,
        "review_count": 45,
    },
    {
        "id": "18",
        "owner_id": "owner18",
        "name": "Papeleria LORE",
        "description": "En Papelería Lore podrás encontrar un gran surtido de útiles escolares y más.",
        "category": "services",
        "location": (25.6632154, -100.290344),
        "address": "Aquiles Serdán 1457A, La Florida, 64800 Monterrey, N.L.",
        "phone": "8137491919",
        "email": "lorepape@gmail.com",
        "website": "www.lorepapeleria.com",
        "social_media": {"facebook": "Papelería Lore"},
        "images": ["papeleria1", "papeleria2"],
        "rating": 4.8,
        "review_count": 37,
    },
    {
        "id": "19",
        "owner_id": "owner19",
        "name": "Abbanti Comida Casera",
        "description": "Comidas Caseras con Sabor de Hogar, Servicio de Comedor, a Domicilio y para Eventos.",
        "category": "food",
        "location": (25.6691125, -100.2799744),
        "address": "Av. Federico Gómez García 1982, Buenos Aires, 64800 Monterrey, N.L.",
        "phone": "8183554980",
        "email": "abbanti.facturacion@gmail.com",
        "website": "www.abbanti.com",
        "social_media": {"facebook": "Abbanti Comidas"},
        "images": ["abbanti1", "abbanti2"],
        "rating": 4.6,
        "review_count": 419,
    },
    {
        "id": "20",
        "owner_id": "owner20",
        "name": "Vasomanía",
        "description": "Tienda de venta de vasos.",
        "category": "retail",
        "location": (25.6637684, -100.282093),
        "address": "Hornos Altos 207, Buenos Aires, 64800 Monterrey, N.L.",
        "phone": "8132591106",
        "email": "vasomania@gmail.com",
        "website": "www.vasomania.com",
        "social_media": {"facebook": "Vasomanía"},
        "images": ["vaso1", "vaso2"],
        "rating": 4.4,
        "review_count": 43,
    },
    {
        "id": "21",
        "owner_id": "owner21",
        "name": "FLORERIA ROMERO",
        "description": "Floreria Romero expertos en Arreglos Florales e Innovadores.",
        "category": "retail",
        "location": (25.6610993, -100.2746258),
        "address": "Av. José Alvarado 2008-Local 4, Jardín Español, 64820 Monterrey, N.L.",
        "phone": "8116367323",
        "email": "Floreriaromero61@gmail.com",
        "website": "www.floreriaromero.com",
        "social_media": {"facebook": "Floreria Romero"},
        "images": ["floreria1", "floreria2"],
        "rating": 4.8,
        "review_count": 29,
    },
    {
        "id": "22",
        "owner_id": "owner22",
        "name": "Naranjo’s Juicy Burgers",
        "description": (
            "Somos el primer Restaurant Bar Arcade Retro para adultos en el país "
            "con maquinitas totalmente originales."
        ),
        "category": "food",
        "location": (25.6759795, -100.2569731),
        "address": "Mier y Noriega 119, Centro de Guadalupe, 67100 Guadalupe, N.L.",
        "phone": "8120502050",
        "email": "naranjo@gmail.com",
        "website": "www.naranjo.com",
        "social_media": {"instagram": "naranjosjuicyburgers", "facebook": "Naranjos Juicy Burger"},
        "images": ["naranjo1", "naranjo2"],
        "rating": 4.7,
        "review_count": 257,
    },
    {
        "id": "23",
        "owner_id": "owner23",
        "name": "EL ASTURIANO",
        "description": "Tienda de ropa.",
        "category": "retail",
        "location": (25.6712874, -100.3239128),
        "address": "Santiago Tapia Ote. 151, Centro, 64000 Monterrey, N.L.",
        "phone": "8183753542",
        "email": "asturiano@gmail.com",
        "website": "www.almaceneselasturiano.com",
        "social_media": {"facebook": "EL ASTURIANO"},
        "images": ["asturiano1", "asturiano2"],
        "rating": 4.4,
        "review_count": 8332,
    },
    {
        "id": "24",
        "owner_id": "owner24",
        "name": "MALA HIERBA",
        "description": "Café y restaurante para que vengas con tus amigos a realizar diferentes manualidades.",
        "category": "entertainment",
        "location": (25.6706663, -100.3318451),
        "address": "C. Mariano Matamoros 825, Centro, 64000 Monterrey, N.L.",
        "phone": "8143128056",
        "email": "malahierba.mty@gmail.com",
        "website": "malahierba.mx",
        "social_media": {"instagram": "malahierba.mty", "facebook": "malahierba.mty"},
        "images": ["malahierba1", "malahierba2"],
        "rating": 4.8,
        "review_count": 1003,
    },
    {
        "id": "25",
        "owner_id": "owner25",
        "name": "The Burger Laboratory",
        "description": "Cientificamente las mejores hamburguesas!!.",
        "category": "food",
        "location": (25.6555803, -100.3132627),
        "address": "Lucila Godoy 206, Roma, 64700 Monterrey, N.L.",
        "phone": "81 1771 6159",
        "email": "burguerlabtec@gmail.com",
        "website": "burger-lab-tec.ola.click",
        "social_media": {"facebook": "BurgerLab Tec"},
        "images": ["laboratory1", "laboratory2"],
        "rating": 4.4,
        "review_count": 657,
    },
]
