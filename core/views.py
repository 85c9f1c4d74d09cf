# core/views.py
from django.shortcuts import render
from django.views.decorators.cache import cache_page

PAGE_CACHE_SECONDS = 60 * 15


def _page(request, template, page, title, description):
    context = {'title': title, 'description': description, 'page': page}
    return render(request, template, context)


@cache_page(PAGE_CACHE_SECONDS)
def home(request):
    return _page(
        request, 'core/home.html', 'home', "Home",
        "ICT Eerbeek - Uw betrouwbare partner voor alle ICT-oplossingen in Eerbeek en omgeving. "
        "Netwerk & security, website ontwerp, IoT & AI oplossingen, en computerhulp.",
    )


@cache_page(PAGE_CACHE_SECONDS)
def diensten(request):
    """Renders the services page."""
    return _page(
        request, 'core/diensten.html', 'diensten', "Onze Diensten",
        "Ontdek ons uitgebreide aanbod van ICT-oplossingen: netwerk & security, website & logo ontwerp, "
        "IoT & AI oplossingen, en all-round computerhulp.",
    )


@cache_page(PAGE_CACHE_SECONDS)
def over_ons(request):
    """Renders the about page."""
    return _page(
        request, 'core/over_ons.html', 'over-ons', "Over ICT Eerbeek",
        "Leer meer over ICT Eerbeek, ons team, onze missie en onze passie voor technologie. "
        "Uw betrouwbare ICT-partner in Eerbeek.",
    )


@cache_page(PAGE_CACHE_SECONDS)
def privacybeleid(request):
    """Renders the privacy policy page."""
    return _page(
        request, 'core/privacybeleid.html', 'privacybeleid', "Privacybeleid",
        "Lees het privacybeleid van ICT Eerbeek. Wij respecteren uw privacy en zorgen voor een veilige "
        "verwerking van uw persoonsgegevens.",
    )
