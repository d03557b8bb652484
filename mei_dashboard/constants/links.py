from enum import Enum
from typing import Tuple
from pydantic import BaseModel

class LinkKind(str, Enum):
    portal = "portal"
    das = "das"
    nfse_issue = "nfse_issue"
    nfse_query = "nfse_query"
    training = "training"
    nfe_issue = "nfe_issue"
    tax_agency = "tax_agency"
    notifications = "notifications"
    annual_declaration = "annual_declaration"

class UsefulLink(BaseModel):
    id: int
    kind: LinkKind
    name: str
    description: str
    url: str

PGMEI_URL = "https://www8.receita.fazenda.gov.br/SimplesNacional/Aplicacoes/ATSPO/pgmei.app/Identificacao"

USEFUL_LINKS: Tuple[UsefulLink, ...] = (
    UsefulLink(id=1, kind=LinkKind.portal, name="Portal do Empreendedor",
               description="Tudo sobre MEI",
               url="https://www.gov.br/empresas-e-negocios/pt-br/empreendedor"),
    UsefulLink(id=2, kind=LinkKind.das, name="PGMEI – Gerar DAS",
               description="Boleto mensal", url=PGMEI_URL),
    UsefulLink(id=3, kind=LinkKind.nfse_issue, name="Emissor Nacional NFS-e",
               description="Emitir nota de serviço",
               url="https://www.nfse.gov.br/EmissorNacional"),
    UsefulLink(id=4, kind=LinkKind.nfse_query, name="Consultar NFS-e",
               description="Ver notas emitidas",
               url="https://www.nfse.gov.br/consultapublica"),
    UsefulLink(id=5, kind=LinkKind.training, name="Sebrae MEI",
               description="Cursos, ajuda e emissor NF-e gratuito",
               url="https://sebrae.com.br/sites/PortalSebrae/mei"),
    UsefulLink(id=6, kind=LinkKind.nfe_issue, name="Emissor NF-e Sebrae",
               description="Nota de produto",
               url="https://sebrae.com.br/sites/PortalSebrae/produtoseservicos/emissornfe"),
    UsefulLink(id=7, kind=LinkKind.tax_agency, name="e-CAC Receita Federal",
               description="Declarações, certidões",
               url="https://cav.receita.fazenda.gov.br"),
    UsefulLink(id=8, kind=LinkKind.notifications, name="Domicílio Eletrônico",
               description="Receber notificações do governo",
               url="https://www.gov.br/empresas-e-negocios/pt-br/empreendedor/domicilio-eletronico"),
    UsefulLink(id=9, kind=LinkKind.annual_declaration, name="Declaração Anual DASN-SIMEI",
               description="Entregar até 31/05",
               url="https://www.gov.br/empresas-e-negocios/pt-br/empreendedor/declaracao-anual"),
)
