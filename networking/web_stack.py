from aws_cdk import (
    CfnOutput,
    Stack,
    aws_ec2 as ec2,
    aws_elasticloadbalancingv2 as elbv2,
)
from constructs import Construct

from common import constants
from common.stack_context import build_name_tag


class WebStack(Stack):
    """Public/private VPC fronted by an internet-facing application load balancer."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.vpc = self.create_vpc()
        self.igw, self.igw_attachment = self.create_internet_gateway(self.vpc)
        self.eip = self.create_eip(self.igw_attachment)

        self.public_subnet = self.create_subnet(
            "public-subnet",
            cidr_block=constants.WEB_PUBLIC_SUBNET_CIDR,
            name=constants.WEB_PUBLIC_SUBNET_NAME,
            public=True,
            availability_zone=constants.WEB_PUBLIC_SUBNET_AZ,
        )
        self.public_subnet_2 = self.create_subnet(
            "public-subnet2",
            cidr_block=constants.WEB_PUBLIC_SUBNET_2_CIDR,
            name=constants.WEB_PUBLIC_SUBNET_2_NAME,
            public=True,
            availability_zone=constants.WEB_PUBLIC_SUBNET_2_AZ,
        )
        self.nat = self.create_nat_gateway(
            self.eip, self.public_subnet, self.igw_attachment
        )

        self.private_subnet = self.create_subnet(
            "private-subnet",
            cidr_block=constants.WEB_PRIVATE_SUBNET_CIDR,
            name=constants.WEB_PRIVATE_SUBNET_NAME,
            public=False,
        )
        self.rt_private = self.create_route_table("rtPrivate", constants.WEB_PRIVATE_RT_NAME)
        self.rt_public = self.create_route_table("rtPublic", constants.WEB_PUBLIC_RT_NAME)
        self.add_routes()
        self.associate_subnets()
        self.s3_endpoint = self.create_s3_endpoint()

        self.alb_sg = self.create_alb_sg()
        self.alb = self.create_application_load_balancer()

        CfnOutput(self, "VpcId", value=self.vpc.ref)
        CfnOutput(self, "AlbDnsName", value=self.alb.attr_dns_name)

    def create_vpc(self) -> ec2.CfnVPC:
        return ec2.CfnVPC(
            self,
            "vpc",
            cidr_block=constants.VPC_CIDR,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=build_name_tag(constants.WEB_VPC_NAME),
        )

    def create_internet_gateway(self, vpc: ec2.CfnVPC):
        igw = ec2.CfnInternetGateway(
            self, "igw", tags=build_name_tag(constants.WEB_IGW_NAME)
        )
        attachment = ec2.CfnVPCGatewayAttachment(
            self,
            "igw-attachment",
            vpc_id=vpc.ref,
            internet_gateway_id=igw.ref,
        )
        return igw, attachment

    def create_eip(self, igw_attachment: ec2.CfnVPCGatewayAttachment) -> ec2.CfnEIP:
        eip = ec2.CfnEIP(self, "eip", domain="vpc")
        eip.node.add_dependency(igw_attachment)
        return eip

    def create_subnet(
        self,
        construct_id: str,
        cidr_block: str,
        name: str,
        public: bool,
        availability_zone: str | None = None,
    ) -> ec2.CfnSubnet:
        return ec2.CfnSubnet(
            self,
            construct_id,
            vpc_id=self.vpc.ref,
            cidr_block=cidr_block,
            map_public_ip_on_launch=public,
            availability_zone=availability_zone,
            tags=build_name_tag(name),
        )

    def create_nat_gateway(
        self,
        eip: ec2.CfnEIP,
        subnet: ec2.CfnSubnet,
        igw_attachment: ec2.CfnVPCGatewayAttachment,
    ) -> ec2.CfnNatGateway:
        nat = ec2.CfnNatGateway(
            self,
            "nat",
            allocation_id=eip.attr_allocation_id,
            subnet_id=subnet.ref,
            tags=build_name_tag(constants.WEB_NAT_NAME),
        )
        nat.node.add_dependency(igw_attachment)
        return nat

    def create_route_table(self, construct_id: str, name: str) -> ec2.CfnRouteTable:
        return ec2.CfnRouteTable(
            self,
            construct_id,
            vpc_id=self.vpc.ref,
            tags=build_name_tag(name),
        )

    def add_routes(self) -> None:
        public_route = ec2.CfnRoute(
            self,
            id="PublicRouteToIgw",
            route_table_id=self.rt_public.ref,
            destination_cidr_block=constants.ANY_IPV4_CIDR,
            gateway_id=self.igw.ref,
        )
        public_route.node.add_dependency(self.igw_attachment)
        ec2.CfnRoute(
            self,
            id="PrivateRouteToNat",
            route_table_id=self.rt_private.ref,
            destination_cidr_block=constants.ANY_IPV4_CIDR,
            nat_gateway_id=self.nat.ref,
        )

    def associate_subnets(self) -> None:
        pairs = (
            (self.public_subnet, self.rt_public),
            (self.public_subnet_2, self.rt_public),
            (self.private_subnet, self.rt_private),
        )
        for subnet, route_table in pairs:
            ec2.CfnSubnetRouteTableAssociation(
                self,
                id=f"{subnet.node.id}-rt-association",
                subnet_id=subnet.ref,
                route_table_id=route_table.ref,
            )

    def create_s3_endpoint(self) -> ec2.CfnVPCEndpoint:
        """Gateway endpoint for S3, routed through the private route table."""
        return ec2.CfnVPCEndpoint(
            self,
            "vpc-endpoint-s3",
            vpc_id=self.vpc.ref,
            service_name=constants.WEB_S3_ENDPOINT_SERVICE.format(
                region=constants.DEFAULT_REGION
            ),
            vpc_endpoint_type="Gateway",
            route_table_ids=[self.rt_private.ref],
        )

    def create_alb_sg(self) -> ec2.CfnSecurityGroup:
        return ec2.CfnSecurityGroup(
            self,
            "sg-alb",
            group_name=constants.ALB_SG_NAME,
            group_description=constants.ALB_SG_DESCRIPTION,
            vpc_id=self.vpc.ref,
            security_group_ingress=[
                ec2.CfnSecurityGroup.IngressProperty(
                    ip_protocol="tcp",
                    from_port=constants.HTTPS_PORT,
                    to_port=constants.HTTPS_PORT,
                    cidr_ip=constants.ANY_IPV4_CIDR,
                )
            ],
            security_group_egress=[
                ec2.CfnSecurityGroup.EgressProperty(
                    ip_protocol="-1",
                    from_port=0,
                    to_port=0,
                    cidr_ip=constants.ANY_IPV4_CIDR,
                )
            ],
        )

    def create_application_load_balancer(self) -> elbv2.CfnLoadBalancer:
        return elbv2.CfnLoadBalancer(
            self,
            "lb",
            name=constants.ALB_NAME,
            scheme="internet-facing",
            type="application",
            security_groups=[self.alb_sg.attr_group_id],
            subnets=[self.public_subnet.ref, self.public_subnet_2.ref],
        )
